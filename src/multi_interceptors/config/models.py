from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, cast

from multi_interceptors.client.config import ClientConfig
from multi_interceptors.config.errors import ConfigError
from multi_interceptors.observability.logging import (
    LEVEL_NAME_TO_INT,
    LOG_FORMAT_CONSOLE,
    LOG_FORMAT_JSON,
)


def _ensure_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{field_name} must be a mapping")
    return cast(Mapping[str, Any], value)


def _coerce_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"{field_name} must be a float")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ConfigError(f"{field_name} must be a float") from exc
    raise ConfigError(f"{field_name} must be a float")


def _coerce_str(value: Any, field_name: str) -> str:
    if isinstance(value, str):
        return value
    return str(value)


@dataclass
class LoggingConfig:
    format: str = LOG_FORMAT_JSON
    level: str = "INFO"

    @property
    def level_int(self) -> int:
        return LEVEL_NAME_TO_INT[self.level]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggingConfig:
        data = _ensure_mapping(data, "logging")
        log_format = _coerce_str(data.get("format", LOG_FORMAT_JSON), "logging.format").strip().lower()
        if log_format not in {LOG_FORMAT_JSON, LOG_FORMAT_CONSOLE}:
            raise ConfigError(f"logging.format must be one of json, console (got {log_format!r})")
        level = _coerce_str(data.get("level", "INFO"), "logging.level").strip().upper()
        if level not in LEVEL_NAME_TO_INT:
            raise ConfigError(f"logging.level must be one of {', '.join(LEVEL_NAME_TO_INT)}")
        return cls(format=log_format, level=level)


def _client_from_dict(name: str, data: Any) -> ClientConfig:
    data = _ensure_mapping(data, f"clients.{name}")
    base_url = data.get("base_url")
    if not base_url:
        raise ConfigError(f"clients.{name}.base_url is required")
    timeout: float | None = 60.0
    if "timeout" in data:
        raw = data["timeout"]
        timeout = None if raw is None else _coerce_float(raw, f"clients.{name}.timeout")
    headers = _ensure_mapping(data.get("default_headers", {}), f"clients.{name}.default_headers")
    return ClientConfig(
        name=name,
        base_url=_coerce_str(base_url, f"clients.{name}.base_url"),
        timeout=timeout,
        default_headers={str(k): _coerce_str(v, f"clients.{name}.default_headers.{k}") for k, v in headers.items()},
    )


@dataclass
class AppConfig:
    """Top-level application configuration."""

    clients: dict[str, ClientConfig] = field(default_factory=dict)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        data = _ensure_mapping(data, "config")
        clients_raw = _ensure_mapping(data.get("clients", {}), "clients")
        clients = {str(name): _client_from_dict(str(name), value) for name, value in clients_raw.items()}
        logging_config = LoggingConfig.from_dict(data.get("logging", {}))
        return cls(clients=clients, logging=logging_config)

    def client(self, name: str) -> ClientConfig:
        try:
            return self.clients[name]
        except KeyError:
            raise ConfigError(f"No client named {name!r} is configured") from None
