"""
Content Digest - heuristic content analysis and summarization.

This package classifies scraped pages, extracts structured facts, key
points and reviews, and builds short and detailed extractive summaries
using only local heuristics.
"""

from content_digest.config import Settings, load_config
from content_digest.utils.logging import setup_logging, get_logger
from content_digest.core import (
    ContentDigestError,
    EmptyContentError,
    ContentType,
    Document,
    ProcessingResult,
)
from content_digest.processor import ContentProcessor

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "ContentDigestError",
    "EmptyContentError",
    "ContentType",
    "Document",
    "ProcessingResult",
    "ContentProcessor",
]
