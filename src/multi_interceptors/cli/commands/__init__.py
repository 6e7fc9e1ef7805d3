"""CLI command modules; each exposes ``register_parser`` and ``run``."""
