"""Logging setup with rich console output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "pedal_inventory"
_configured = False


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Configure the package logger once.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Optional rich console; logs go to stderr by default.
    """
    global _configured
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper())
    if _configured:
        return
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the package logger."""
    if name == _LOGGER_NAME or name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
