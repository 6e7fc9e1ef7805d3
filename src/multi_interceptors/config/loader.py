from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import AppConfig

_ROOT_SECTION = "multi_interceptors"

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-(.*?))?\}")


def get_default_config_path() -> Path | None:
    """Return the first default config path that exists."""
    candidates = [
        Path.cwd() / "multi_interceptors.yaml",
        Path.cwd() / "multi_interceptors.yml",
        Path.home() / ".multi_interceptors.yaml",
        Path.home() / ".multi_interceptors.yml",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_default_config() -> AppConfig:
    """Load the default config file into AppConfig."""
    path = get_default_config_path()
    if path is None:
        raise ConfigError("No default config file found")
    return load_config(path)


def load_config(path: str | Path | None) -> AppConfig:
    """Load a YAML config file into AppConfig."""
    if not path:
        return load_default_config()
    data = _load_config_mapping(path)
    try:
        return AppConfig.from_dict(data)
    except ConfigError:
        raise
    except Exception as exc:
        raise ConfigError(f"Failed to build config from {path}") from exc


def _load_config_mapping(path: str | Path) -> dict[str, Any]:
    config_path = Path(path).expanduser()
    if config_path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"Unsupported config file type: {config_path.suffix}")
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        content = config_path.read_text(encoding="utf-8")
        data = _parse_yaml_with_env(content)
    except ConfigError:
        raise
    except Exception as exc:
        raise ConfigError(f"Failed to load config file: {config_path}") from exc
    return _normalize_config_root(data)


def _parse_yaml_with_env(content: str) -> Mapping[str, Any]:
    parsed = yaml.safe_load(content) or {}
    if not isinstance(parsed, Mapping):
        raise ConfigError("Config file must parse to a mapping")
    return _expand_env_in_data(parsed)


def _expand_env_in_data(value: Any) -> Any:
    if isinstance(value, str):
        return _expand_env_value(value)
    if isinstance(value, Mapping):
        return {key: _expand_env_in_data(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_expand_env_in_data(item) for item in value]
    return value


def _expand_env_value(value: str) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        default = match.group(2)
        env_value = os.getenv(name)
        if env_value is None or env_value == "":
            if default is None:
                raise ConfigError(
                    f"Environment variable '{name}' is not set and no default provided"
                )
            return default
        return env_value

    return _ENV_PATTERN.sub(replace, value)


def _normalize_config_root(data: Mapping[str, Any]) -> dict[str, Any]:
    if _ROOT_SECTION not in data:
        return dict(data)
    nested = data[_ROOT_SECTION]
    if not isinstance(nested, Mapping):
        raise ConfigError(f"{_ROOT_SECTION} section must be a mapping")
    merged = dict(nested)
    for key, value in data.items():
        if key == _ROOT_SECTION:
            continue
        merged[key] = value
    return merged
