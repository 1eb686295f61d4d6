"""Logging helpers for consistent instrumentation."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its :mod:`logging` constant."""

    name = str(level).upper()
    if name not in _LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of {', '.join(_LEVELS)}")
    return getattr(logging, name)


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Configure the root logger with optional rich tracebacks."""

    console = Console(stderr=True)
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks)
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


__all__ = ["resolve_level", "setup_logging"]
