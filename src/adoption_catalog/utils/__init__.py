"""Utility modules for the adoption catalog."""

from adoption_catalog.utils.logging import get_logger, setup_logging
from adoption_catalog.utils.text import strip_markup, truncate_text

__all__ = [
    "get_logger",
    "setup_logging",
    "strip_markup",
    "truncate_text",
]
