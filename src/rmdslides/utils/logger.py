"""Minimal logging utilities for rmdslides.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from rmdslides.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Paginating chapter")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "rmdslides." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'rmdslides.mymodule'
    """
    if not (name == "rmdslides" or name.startswith("rmdslides.")):
        name = f"rmdslides.{name}"
    return logging.getLogger(name)
