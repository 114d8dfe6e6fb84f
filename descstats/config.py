"""Runtime settings, read from environment variables at import time."""
from __future__ import annotations

import logging
import os

# Log level for the descstats package logger (name or number, e.g. "DEBUG" or "10")
LOG_LEVEL = os.environ.get("DESCSTATS_LOG_LEVEL", "INFO")

# Gunicorn-like bracketed log lines
LOG_FORMAT = "[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S %z"


def level_from_name(name: str | int) -> int:
    """Resolve a logging level name (any case) or number to an int level.

    Raises ValueError for names ``logging`` does not know.
    """
    if isinstance(name, int):
        return name
    text = name.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name!r}")
    return level
