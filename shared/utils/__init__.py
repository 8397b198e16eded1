"""
Utility modules
"""

from .logger import configure_logging, get_logger, LoggerMixin

__all__ = [
    "configure_logging",
    "get_logger",
    "LoggerMixin",
]
