"""Logging setup shared by the content store and the check CLI."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str | None) -> int:
    """Turn a level name, number or None (LOG_LEVEL env, else INFO) into an int."""
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    level: int | str | None = None,
    module_name: str = "site_content",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Calling it again for the same name returns the existing logger untouched.

    Args:
        level: Level as int or name. Defaults to LOG_LEVEL, else INFO.
        module_name: Name for the logger instance.
        stream: Output stream (default stdout).

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    resolved = _resolve_level(level)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
