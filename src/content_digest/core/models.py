"""
Data models for the processing pipeline.

Defines the input Document, the intermediate scored sentences and the
ProcessingResult handed to the persistence collaborator. All entities
are created fresh per processing run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from content_digest.core.metadata import MetaValue


class ContentType(str, Enum):
    """Coarse genre of a document, driving strategy selection."""

    PRODUCT = "product"
    ARTICLE = "article"
    VIDEO = "video"
    LISTING = "listing"
    GENERAL = "general"


@dataclass(frozen=True)
class Document:
    """
    A scraped page as delivered by the scraper.

    Metadata is normalized to a MetaValue on construction, so callers may
    pass a plain dict, None, or anything JSON-like.
    """

    url: str = ""
    title: str = ""
    raw_text: str = ""
    markdown: str = ""
    metadata: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MetaValue.from_json(self.metadata))

    @property
    def text(self) -> str:
        """Markdown when present, plain text otherwise."""
        if self.markdown and self.markdown.strip():
            return self.markdown
        return self.raw_text or ""

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        """
        Create from a scraper record.

        Accepts both the database column names (content_text,
        content_markdown) and the camelCase names used by the extension.
        """
        return cls(
            url=data.get("url") or "",
            title=data.get("title") or "",
            raw_text=data.get("content_text") or data.get("rawText") or data.get("raw_text") or "",
            markdown=data.get("content_markdown") or data.get("markdown") or "",
            metadata=data.get("metadata"),
        )


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its relevance score and original position."""

    text: str
    score: float
    index: int = 0

    @property
    def word_count(self) -> int:
        return len(self.text.split())


@dataclass
class ExtractedData:
    """
    Structured facts pulled out of a document.

    Empty collections are stored as None, mirroring the nullable columns
    of the persistence schema.
    """

    type: ContentType
    structured_data: dict[str, Any] | None = None
    key_points: list[str] | None = None
    actionable_insights: list[str] | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict:
        """Convert to the JSON blob stored by the persistence layer."""
        return {
            "type": self.type.value,
            "structuredData": self.structured_data,
            "keyPoints": self.key_points,
            "actionableInsights": self.actionable_insights,
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class Summaries:
    """Short (~150 words) and detailed narrative summaries."""

    short: str
    detailed: str


@dataclass
class ProcessingResult:
    """
    Complete output of one processing run.

    This is the only object handed to the persistence collaborator.
    """

    summaries: Summaries
    content_type: ContentType
    extracted_data: ExtractedData
    key_points: list[str] | None = None
    reviews: list[str] | None = None

    def to_dict(self) -> dict:
        """Convert to a JSON-ready record matching the storage columns."""
        return {
            "short_summary": self.summaries.short,
            "detailed_summary": self.summaries.detailed,
            "content_type": self.content_type.value,
            "extracted_data": self.extracted_data.to_dict(),
            "key_points": self.key_points,
            "reviews": self.reviews,
        }


@dataclass
class StrategyOutput:
    """Per content type extraction output before it becomes ExtractedData."""

    structured: dict[str, Any] = field(default_factory=dict)
    key_points: list[str] = field(default_factory=list)
    insights: list[str] = field(default_factory=list)


__all__ = [
    "ContentType",
    "Document",
    "ScoredSentence",
    "ExtractedData",
    "Summaries",
    "ProcessingResult",
    "StrategyOutput",
]
