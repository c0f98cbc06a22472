"""Centralized logging configuration for the CLI and the backend."""

from __future__ import annotations

import logging
import os
from typing import Iterable

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"
SERVER_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str | int | None = None) -> str:
    """Pick the log level: explicit value, then ``WHEEL_LOG_LEVEL``, then INFO."""
    if isinstance(level, int):
        return logging.getLevelName(level)
    raw_level = level if level is not None else os.getenv("WHEEL_LOG_LEVEL")
    return (raw_level or "INFO").upper()


def configure_logging(
    *,
    level: str | int | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    include_uvicorn: bool = False,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure application logging.

    Safe to call more than once; ``logging.basicConfig`` only installs a
    handler the first time.

    Args:
        level: Optional explicit log level (name or number).
        format: Log format string.
        datefmt: Date format string.
        include_uvicorn: Whether to align uvicorn loggers with the configured level.
        extra_loggers: Additional logger names to align with the configured level.

    Returns:
        The backend application logger (``wheel.backend``).
    """
    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("wheel.backend")
    app_logger.setLevel(resolved_level)

    names = list(extra_loggers or [])
    if include_uvicorn:
        names.extend(UVICORN_LOGGERS)
    for logger_name in names:
        logging.getLogger(logger_name).setLevel(resolved_level)

    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
