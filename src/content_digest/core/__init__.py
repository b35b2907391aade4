"""
Core module for Content Digest.

Contains the data model, the metadata value type and the exceptions
used throughout the pipeline.
"""

from content_digest.core.exceptions import (
    ContentDigestError,
    ConfigurationError,
    ProcessingError,
    EmptyContentError,
    SummarizationError,
)
from content_digest.core.metadata import MetaKind, MetaValue
from content_digest.core.models import (
    ContentType,
    Document,
    ScoredSentence,
    ExtractedData,
    Summaries,
    ProcessingResult,
    StrategyOutput,
)

__all__ = [
    # Errors
    "ContentDigestError",
    "ConfigurationError",
    "ProcessingError",
    "EmptyContentError",
    "SummarizationError",
    # Metadata
    "MetaKind",
    "MetaValue",
    # Models
    "ContentType",
    "Document",
    "ScoredSentence",
    "ExtractedData",
    "Summaries",
    "ProcessingResult",
    "StrategyOutput",
]
