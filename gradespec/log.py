"""Logging configuration for gradespec."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gradespec"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """
    Configure and return the package logger.

    A single RichHandler is attached the first time this is called; later
    calls only adjust the level.

    Args:
        level: Logging level name (e.g. "INFO").
        console: Console the handler writes to. Defaults to stderr.

    Returns:
        The configured ``gradespec`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.debug("Logging initialized at level %s", level.upper())
    return logger
