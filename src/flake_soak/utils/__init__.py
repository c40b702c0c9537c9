"""Shared utility functions.

Key modules:
    - logging: Logging configuration
"""

from .logging import configure_logging, get_logger, resolve_level

__all__ = [
    "configure_logging",
    "get_logger",
    "resolve_level",
]
