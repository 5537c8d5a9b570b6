"""Minimal logging utilities for Undermark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from undermark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving paragraph")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "undermark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'undermark.mymodule'
    """
    if not (name == "undermark" or name.startswith("undermark.")):
        name = f"undermark.{name}"
    return logging.getLogger(name)
