"""
Shared logging configuration for simple-dto.

Library modules only ever call ``get_logger``. The package logger carries a
``NullHandler`` so nothing is printed unless the host application configures
logging; applications that want the library's hydration trail written to disk
call ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

from .config import LoggingConfig


ROOT_LOGGER_NAME = "simple_dto"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(message)s]"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# (file name, minimum level) for each on-disk log
LOG_FILES: Tuple[Tuple[str, int], ...] = (
    ("error.log", logging.ERROR),
    ("warning.log", logging.WARNING),
    ("debug.log", logging.DEBUG),
)

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[logging.Handler] = []
    for file_name, level in LOG_FILES:
        handler = logging.FileHandler(os.path.join(config.log_dir, file_name))
        handler.setLevel(level)
        handlers.append(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level.upper())
    handlers.append(console_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Attach file and console handlers to the ``simple_dto`` logger.

    This function is idempotent: calling it multiple times will not
    re-add handlers if they already exist.
    """

    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(package_logger, "_simple_dto_logging_configured", False):
        return

    os.makedirs(config.log_dir, exist_ok=True)
    package_logger.setLevel(config.log_level.upper())

    for handler in _build_handlers(config):
        package_logger.addHandler(handler)

    package_logger._simple_dto_logging_configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """
    Convenience helper to get a logger for a given module or subsystem.
    """

    return logging.getLogger(name)
