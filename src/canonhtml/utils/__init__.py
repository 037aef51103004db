"""Utility modules for canonhtml.

Provides:
- logger: get_logger for logging
"""

from canonhtml.utils.logger import get_logger

__all__ = [
    "get_logger",
]
