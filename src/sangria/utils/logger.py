"""Minimal logging utilities for Sangria.

Provides a simple get_logger function that wraps the standard library logging.
Sangria never installs handlers; configure logging in the application.

Example:
    >>> from sangria.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sangria." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'sangria.mymodule'
    """
    if not (name == "sangria" or name.startswith("sangria.")):
        name = f"sangria.{name}"
    return logging.getLogger(name)
