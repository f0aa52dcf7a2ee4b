"""Utility modules for pairparse.

Provides:
- logger: get_logger for logging
"""

from pairparse.utils.logger import get_logger

__all__ = [
    "get_logger",
]
