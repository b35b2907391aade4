"""
Utilities module for Content Digest.

Provides logging setup and helpers.
"""

from content_digest.utils.logging import setup_logging, get_logger, reset_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "reset_logging",
]
