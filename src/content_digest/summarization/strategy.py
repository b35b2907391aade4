"""
Summary strategies.

The engine takes its summary strategy as a constructor argument instead
of probing for platform text services. The heuristic strategy is always
available and is the default; hosts may inject any object implementing
SummaryStrategy.
"""

from typing import Protocol

from content_digest.core.models import ContentType, ScoredSentence, Summaries
from content_digest.summarization.narrative import NarrativeSummaryBuilder


class SummaryStrategy(Protocol):
    """Protocol for summary strategy implementations."""

    name: str

    def summarize(
        self,
        scored: list[ScoredSentence],
        content_type: ContentType,
        text: str,
        key_points: list[str] | None = None,
    ) -> Summaries: ...


class HeuristicSummaryStrategy:
    """
    Extractive summaries from scored sentences.

    Never raises for non-empty input.
    """

    name = "heuristic"

    def __init__(self, builder: NarrativeSummaryBuilder) -> None:
        self.builder = builder

    def summarize(
        self,
        scored: list[ScoredSentence],
        content_type: ContentType,
        text: str,
        key_points: list[str] | None = None,
    ) -> Summaries:
        return self.builder.build_summaries(scored, content_type, text, key_points)
