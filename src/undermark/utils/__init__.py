"""Utility modules for Undermark.

Provides:
- logger: get_logger for logging
"""

from undermark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
