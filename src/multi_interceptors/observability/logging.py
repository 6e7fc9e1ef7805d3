"""Structured log output for outgoing client calls.

Records emitted while a request is in flight carry the name of the client
that sent it and the request's tracking id, so every line about one call
can be joined with what the counterpart service saw in ``X-Tracking-ID``.
"""

from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import IO, Any

__all__ = [
    "LEVEL_NAME_TO_INT",
    "LOG_FORMAT_CONSOLE",
    "LOG_FORMAT_ENV",
    "LOG_FORMAT_JSON",
    "PACKAGE_LOGGER",
    "CallContextFilter",
    "CallJSONFormatter",
    "configure_logging",
    "request_log_context",
]

PACKAGE_LOGGER = "multi_interceptors"

LOG_FORMAT_ENV = "MULTI_INTERCEPTORS_LOG_FORMAT"
LOG_FORMAT_JSON = "json"
LOG_FORMAT_CONSOLE = "console"

LEVEL_NAME_TO_INT: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(client)s %(request_id)s] %(message)s"

# Per-call attributes the client passes through ``extra=``.
_CALL_FIELDS = ("method", "url", "status_code")

_UNSET = "-"

_current_call: contextvars.ContextVar[tuple[str, str]] = contextvars.ContextVar(
    "multi_interceptors_current_call", default=(_UNSET, _UNSET)
)


@contextmanager
def request_log_context(client: str, request_id: str | None) -> Iterator[None]:
    """Tag records logged inside the block with ``client`` and ``request_id``."""
    token = _current_call.set((client or _UNSET, request_id or _UNSET))
    try:
        yield
    finally:
        _current_call.reset(token)


class CallContextFilter(logging.Filter):
    """Copies the in-flight call onto each record as ``client``/``request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        client, request_id = _current_call.get()
        if not hasattr(record, "client"):
            record.client = client
        if not hasattr(record, "request_id"):
            record.request_id = request_id
        return True


class CallJSONFormatter(logging.Formatter):
    """One JSON object per record, including the call fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "client": getattr(record, "client", _UNSET),
            "request_id": getattr(record, "request_id", _UNSET),
        }
        for field in _CALL_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_format(log_format: str | None) -> str:
    value = (log_format or os.getenv(LOG_FORMAT_ENV) or LOG_FORMAT_JSON).strip().lower()
    return LOG_FORMAT_CONSOLE if value == LOG_FORMAT_CONSOLE else LOG_FORMAT_JSON


def configure_logging(
    *,
    log_format: str | None = None,
    level: int = logging.INFO,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Send every ``multi_interceptors.*`` record to one structured handler.

    Calling it again replaces the handler installed by the previous call.
    The format is ``log_format`` or, when unset, the
    ``MULTI_INTERCEPTORS_LOG_FORMAT`` environment variable; JSON otherwise.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in logger.handlers if getattr(h, "_call_handler", False)]:
        logger.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    if _resolve_format(log_format) == LOG_FORMAT_CONSOLE:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    else:
        handler.setFormatter(CallJSONFormatter())
    handler.addFilter(CallContextFilter())
    handler._call_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
