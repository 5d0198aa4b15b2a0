"""Runtime configuration for the formatter app, read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .registry import list_formats

ENV_PREFIX = "JFORMATTER_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass
class AppConfig:
    default_format: str = "JSON"
    server_name: str = "127.0.0.1"
    server_port: int = 7860
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        validate_config(self)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def validate_config(config: AppConfig) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If any values are invalid.
    """
    formats = list_formats()
    if config.default_format not in formats:
        raise ConfigError(f"default_format must be one of {formats}, got {config.default_format}")

    if not 0 < config.server_port < 65536:
        raise ConfigError(f"server_port must be between 1 and 65535, got {config.server_port}")

    if config.log_level not in _LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {_LOG_LEVELS}, got {config.log_level}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the app config from JFORMATTER_* variables, defaults elsewhere.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    if environ is None:
        environ = os.environ

    values = {}
    for key in ("default_format", "server_name", "log_level"):
        raw = environ.get(ENV_PREFIX + key.upper())
        if raw is not None and raw.strip():
            values[key] = raw.strip()

    if "default_format" in values:
        values["default_format"] = values["default_format"].upper()
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()

    raw_port = environ.get(ENV_PREFIX + "SERVER_PORT")
    if raw_port is not None and raw_port.strip():
        try:
            values["server_port"] = int(raw_port)
        except ValueError:
            raise ConfigError(f"server_port must be an integer, got {raw_port!r}") from None

    return AppConfig(**values)
