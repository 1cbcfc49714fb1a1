"""Logging helpers for the front end and the self-check runner."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_LOGGER_NAME = "scicalc"


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def set_level(level: str | int, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Apply a level given as a name ("debug") or a logging constant."""
    logger = get_logger(name)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
    return logger


__all__ = ["DEFAULT_FORMAT", "get_logger", "set_level"]
