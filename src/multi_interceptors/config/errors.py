class ConfigError(RuntimeError):
    """Raised when configuration loading fails."""
