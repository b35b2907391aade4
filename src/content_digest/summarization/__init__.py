"""
Summarization module for Content Digest.

Provides narrative summary construction and the injectable summary
strategy used by the engine.
"""

from content_digest.summarization.narrative import NarrativeSummaryBuilder
from content_digest.summarization.strategy import (
    SummaryStrategy,
    HeuristicSummaryStrategy,
)

__all__ = [
    "NarrativeSummaryBuilder",
    "SummaryStrategy",
    "HeuristicSummaryStrategy",
]
