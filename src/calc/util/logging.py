from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_ROOT = "calc"


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: int | str = logging.INFO, stderr: bool = True) -> None:
    """Route log records through rich; stdout stays free for results."""
    console = Console(stderr=stderr)
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name is None:
        return logging.getLogger(LOGGER_ROOT)
    return logging.getLogger(name)
