"""Logging setup for the gridsearch package."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "gridsearch"


def configure_logging(
    level: int | str = logging.WARNING, *, console: Console | None = None
) -> logging.Logger:
    """Route ``gridsearch.*`` loggers through a single Rich handler."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
