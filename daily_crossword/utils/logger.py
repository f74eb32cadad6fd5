"""Logging setup shared by the CLI, the web app and the engine."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Connection pool chatter from word table downloads.
NOISY_LOGGERS = ("urllib3",)


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map ``"debug"``/``"INFO"``/... to a logging level, ``default`` otherwise."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install one handler on the root logger.

    Logs go to stderr by default so the CLI can keep stdout for JSON.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "daily_crossword")
