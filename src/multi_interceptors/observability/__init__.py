from __future__ import annotations

from multi_interceptors.observability.logging import (
    LEVEL_NAME_TO_INT,
    LOG_FORMAT_CONSOLE,
    LOG_FORMAT_ENV,
    LOG_FORMAT_JSON,
    PACKAGE_LOGGER,
    configure_logging,
    request_log_context,
)

__all__ = [
    "LEVEL_NAME_TO_INT",
    "LOG_FORMAT_CONSOLE",
    "LOG_FORMAT_ENV",
    "LOG_FORMAT_JSON",
    "PACKAGE_LOGGER",
    "configure_logging",
    "request_log_context",
]
