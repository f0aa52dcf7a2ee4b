"""Minimal logging utilities for pairparse.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from pairparse.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning text")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pairparse." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pairparse.mymodule'
    """
    if not (name == "pairparse" or name.startswith("pairparse.")):
        name = f"pairparse.{name}"
    return logging.getLogger(name)
