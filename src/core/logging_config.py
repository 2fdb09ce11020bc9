"""Logging setup shared by the web app and the CLI.

Every module logs through `logging.getLogger(__name__)`; this module only
attaches one Rich handler to each top-level package logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACES = ("core", "adapters", "web", "cli")


def setup_logging(level: str = "INFO", *, console: Console | None = None) -> None:
    """Attach a single RichHandler to the project loggers (idempotent)."""

    level_value = getattr(logging, (level or "INFO").upper(), logging.INFO)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%H:%M:%S"))

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level_value)
        if any(isinstance(h, RichHandler) for h in logger.handlers):
            continue
        logger.addHandler(handler)
        logger.propagate = False
