"""
Configuration models and loading logic for simple-dto.

The library itself needs very little configuration; this module holds the
logging settings used by ``simple_dto.core.logging`` and loads them from the
environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from .errors import ConfigError


_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class LoggingConfig:
    """
    Logging-related configuration.
    """

    log_dir: str = "logs"
    log_level: str = "INFO"


@dataclass
class SimpleDtoConfig:
    """
    Top-level configuration for simple-dto.
    """

    logging: Optional[LoggingConfig] = None


def _read_log_level(name: str, default: str) -> str:
    """
    Read a log level name from the environment, rejecting unknown levels.
    """

    value = os.getenv(name, default).strip().upper()
    if value not in _VALID_LOG_LEVELS:
        raise ConfigError(
            f"{name} must be one of {', '.join(_VALID_LOG_LEVELS)}, got {value!r}"
        )
    return value


def load_config() -> SimpleDtoConfig:
    """
    Load simple-dto configuration from environment variables.

    Environment variables:
        SIMPLEDTO_LOG_DIR: Directory for log files (default: "logs").
        SIMPLEDTO_LOG_LEVEL: Log level for the ``simple_dto`` logger
            (default: "INFO").
    """

    log_dir = os.getenv("SIMPLEDTO_LOG_DIR", "logs")
    if not log_dir.strip():
        raise ConfigError("SIMPLEDTO_LOG_DIR must not be empty")

    log_level = _read_log_level("SIMPLEDTO_LOG_LEVEL", "INFO")

    return SimpleDtoConfig(
        logging=LoggingConfig(log_dir=log_dir, log_level=log_level),
    )
