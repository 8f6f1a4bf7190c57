"""Logging setup for mobbuild.

Every module logs through ``logging.getLogger(__name__)``.  The CLI (or an
embedding application) calls :func:`configure_logging` once to route those
records to the shared Rich console.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from .utils import console

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_level(level: str | None) -> int:
    """Map a ``DEBUG``/``INFO``/``WARN``/``ERROR`` name to a logging level.

    Unknown or empty names resolve to ``INFO``.
    """
    if not level:
        return logging.INFO
    return _LEVELS.get(level.strip().upper(), logging.INFO)


def configure_logging(level: str | None = "INFO") -> logging.Logger:
    """Install a ``RichHandler`` on the ``mobbuild`` logger.

    Calling this again replaces the previous handler, so the level can be
    changed at runtime.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("mobbuild")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger
