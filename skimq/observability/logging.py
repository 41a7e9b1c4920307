"""
Logging setup for the skimq package.

All module loggers live under the ``skimq`` namespace. One stderr handler is
attached to the package logger (never to the root logger), so embedding
applications keep control of their own logging and CLI JSON on stdout stays
clean. The level comes from ``SKIMQ_LOG_LEVEL`` and can be changed at runtime
with ``set_level``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

PACKAGE_LOGGER: Final[str] = "skimq"
_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured: bool = False


def _resolve_level(level_name: str | None = None) -> int:
    """Numeric level for a name like "debug"; INFO when the name is unknown."""
    name = (level_name or os.getenv("SKIMQ_LOG_LEVEL", "INFO")).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _configure_package_logger() -> logging.Logger:
    global _configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)
        package_logger.setLevel(_resolve_level())
        _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for a skimq module.

    Names outside the package namespace (e.g. "__main__") are nested under
    it so they share the package handler.
    """
    _configure_package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level_name: str) -> int:
    """
    Change the package log level at runtime.

    Returns:
        The numeric level that was applied
    """
    level = _resolve_level(level_name)
    _configure_package_logger().setLevel(level)
    return level
