"""Minimal logging utilities for canonhtml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from canonhtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Formatting fragment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "canonhtml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("editor")
        >>> logger.name
        'canonhtml.editor'
    """
    if not (name == "canonhtml" or name.startswith("canonhtml.")):
        name = f"canonhtml.{name}"
    return logging.getLogger(name)
