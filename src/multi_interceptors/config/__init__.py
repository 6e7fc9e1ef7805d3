"""Configuration helpers."""

from .errors import ConfigError
from .loader import get_default_config_path, load_config, load_default_config
from .models import AppConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "get_default_config_path",
    "load_config",
    "load_default_config",
]
