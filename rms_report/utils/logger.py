"""
Logging configuration for rms-report.
Log records go to stderr through rich, console narration stays on stdout.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int = logging.INFO,
    console: Optional[Console] = None,
) -> None:
    """
    Configure logging for rms-report.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        console: Console to render log records on. Defaults to stderr.
    """
    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    root_logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
