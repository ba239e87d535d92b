"""Configuration support for the Mirror CLI and compiler.

Values are resolved in this order, later sources winning:

1. built-in defaults;
2. ``mirror.toml`` (or the ``[tool.mirror]`` table of ``pyproject.toml``);
3. ``MIRROR_*`` environment variables;
4. explicit overrides, usually command-line flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError
from .llm.local_llm import DEFAULT_BASE_URL, DEFAULT_MODEL

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "mirror.toml"

ENV_MAP = {
    "MIRROR_BASE_URL": "base_url",
    "MIRROR_MODEL": "model",
    "MIRROR_TIMEOUT": "timeout",
    "MIRROR_MAX_RETRIES": "max_retries",
    "MIRROR_LANGUAGE": "language",
    "MIRROR_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True)
class MirrorConfig:
    """Resolved settings for a compile run."""

    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = 60.0
    max_retries: int = 2
    retry_base_delay: float = 0.5
    retry_max_delay: float = 5.0
    language: str = "JavaScript"
    log_level: str = "warning"
    source: Optional[Path] = None

    def llm_config(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "retry_base_delay": self.retry_base_delay,
            "retry_max_delay": self.retry_max_delay,
        }

    def merged(self, overrides: Mapping[str, Any], origin: str = "overrides") -> "MirrorConfig":
        """Return a copy with non-``None`` overrides applied and validated."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return replace(self, **_coerce(values, origin))


_FIELD_TYPES = {f.name: f.type for f in fields(MirrorConfig) if f.name != "source"}


def _coerce(values: Mapping[str, Any], origin: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in values.items():
        if key not in _FIELD_TYPES:
            raise ConfigError(
                f"Unknown configuration key '{key}' in {origin}",
                hint=f"Known keys: {', '.join(sorted(_FIELD_TYPES))}",
            )
        expected = _FIELD_TYPES[key]
        try:
            if expected == "float":
                value = float(value)
            elif expected == "int":
                value = int(value)
            else:
                value = str(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid value for '{key}' in {origin}: {value!r}") from exc
        if expected in ("float", "int") and value < 0:
            raise ConfigError(f"'{key}' must not be negative (got {value} in {origin})")
        if key == "log_level":
            value = value.lower()
            if value not in LOG_LEVELS:
                raise ConfigError(
                    f"Invalid log level '{value}' in {origin}",
                    hint=f"Choose one of: {', '.join(LOG_LEVELS)}",
                )
        result[key] = value
    return result


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Could not read configuration file: {exc}", path=str(path)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML: {exc}", path=str(path)) from exc


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """``mirror.toml`` in ``start``, else a ``pyproject.toml`` with ``[tool.mirror]``."""
    directory = Path(start or Path.cwd())
    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = directory / "pyproject.toml"
    if pyproject.is_file() and "mirror" in _read_toml(pyproject).get("tool", {}):
        return pyproject
    return None


def load_config(
    path: Optional[Path] = None,
    start: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> MirrorConfig:
    """Resolve configuration from file, environment and overrides."""
    config = MirrorConfig()

    config_path = Path(path) if path is not None else find_config_file(start)
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError("Configuration file not found", path=str(config_path))
        data = _read_toml(config_path)
        if config_path.name == "pyproject.toml":
            data = data.get("tool", {}).get("mirror", {})
        config = replace(config.merged(data, origin=str(config_path)), source=config_path)
        logger.debug("Loaded configuration from %s", config_path)

    environ = os.environ if env is None else env
    env_values = {field_name: environ[var] for var, field_name in ENV_MAP.items() if environ.get(var)}
    config = config.merged(env_values, origin="environment")

    if overrides:
        config = config.merged(overrides, origin="command line")
    return config


__all__ = ["MirrorConfig", "load_config", "find_config_file", "CONFIG_FILENAME", "ENV_MAP"]
