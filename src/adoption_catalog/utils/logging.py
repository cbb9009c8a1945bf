"""Logging configuration for the adoption catalog."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Log output goes to stderr so it never mixes with rendered catalog pages
console = Console(stderr=True)

# Logger cache
_loggers: dict[str, logging.Logger] = {}

# HTTP client loggers; their per-request INFO lines are only wanted when debugging
HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO") -> None:
    """
    Set up logging configuration with rich formatting.

    At DEBUG the httpx request log is kept, so the single listing
    request and its status show up next to the loader's own messages.
    At any other level it is silenced below WARNING.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
                # Messages quote API text verbatim
                markup=False,
            )
        ],
    )
    get_logger().setLevel(log_level)

    http_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        name = "adoption_catalog"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
