"""Standard Python logging configuration for the descstats package."""
from __future__ import annotations

import logging
import sys

from descstats import config

PACKAGE_LOGGER = "descstats"


def setup_logging(level: str | int | None = None) -> None:
    """Configure the ``descstats`` logger to write to stdout.

    Only the package logger is touched; the root logger belongs to the
    application. Safe to call more than once, later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    resolved = config.level_from_name(config.LOG_LEVEL if level is None else level)
    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)

    # Configure stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False

    setup_logging._configured = True  # type: ignore[attr-defined]


def reset_logging() -> None:
    """Undo :func:`setup_logging` so it can be applied again."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    setup_logging._configured = False  # type: ignore[attr-defined]
