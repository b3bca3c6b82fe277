"""Logging setup for the command-line tool."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Route log records to standard error through rich.

    Safe to call more than once; the root handlers are replaced each time.

    Args:
        level: Log level name, e.g. "DEBUG".
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
