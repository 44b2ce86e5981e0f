"""Utility modules for csslex.

Provides:
- logger: get_logger for logging
"""

from csslex.utils.logger import get_logger

__all__ = ["get_logger"]
