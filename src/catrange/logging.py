# src/catrange/logging.py
"""
Package logging helpers.

The library never configures the root logger. It attaches a NullHandler to
the ``catrange`` logger and honours two environment variables:

    CATRANGE_VERBOSE=1        -> DEBUG on the package logger
    CATRANGE_LOG_LEVEL=INFO   -> explicit level (wins over CATRANGE_VERBOSE)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "catrange"

_configured = False


def _resolve_level() -> Optional[int]:
    explicit = os.getenv("CATRANGE_LOG_LEVEL")
    if explicit:
        level = logging.getLevelName(explicit.strip().upper())
        if isinstance(level, int):
            return level
    if os.getenv("CATRANGE_VERBOSE"):
        return logging.DEBUG
    return None


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(logging.NullHandler())
    level = _resolve_level()
    if level is not None:
        root.setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``catrange`` namespace."""
    _configure_root()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, message: str, exc: BaseException) -> None:
    """
    Log an exception without flooding normal output.

    The traceback is only attached when the logger is enabled for DEBUG.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s: %s", message, exc, exc_info=exc)
    else:
        logger.warning("%s: %s", message, exc)
