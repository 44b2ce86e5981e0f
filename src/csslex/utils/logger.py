"""Minimal logging utilities for csslex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from csslex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing stylesheet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "csslex." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'csslex.mymodule'
    """
    if not (name == "csslex" or name.startswith("csslex.")):
        name = f"csslex.{name}"
    return logging.getLogger(name)
