"""
Pydantic settings models for Content Digest.

Every heuristic threshold used by the pipeline lives here so hosts and
tests can tune them without touching the analysis code. Defaults are the
empirically tuned values of the original desktop processor.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TextSettings(BaseModel):
    """Tokenizer and sentence segmentation limits."""

    max_input_chars: int = Field(
        default=100_000,
        ge=1000,
        le=1_000_000,
        description="Input text is truncated to this many characters",
    )
    min_sentence_chars: int = Field(
        default=10,
        ge=0,
        le=200,
        description="Sentences with trimmed length at or below this are dropped",
    )
    min_token_chars: int = Field(
        default=2,
        ge=0,
        le=20,
        description="Word tokens with length at or below this are dropped",
    )


class ScoringSettings(BaseModel):
    """TF-IDF sentence scorer adjustments."""

    product_description_bonus: float = Field(
        default=3.0, description="Bonus for sentences mentioning a description")
    product_price_only_penalty: float = Field(
        default=5.0, ge=0.0, description="Penalty for sentences that are only a price")
    product_spec_line_penalty: float = Field(
        default=3.0, ge=0.0, description="Penalty for short 'Key: Value' spec lines")
    product_spec_max_line_chars: int = Field(
        default=150, ge=10, description="Spec lines must be shorter than this")
    product_spec_max_key_chars: int = Field(
        default=30, ge=1, description="Spec line keys must be shorter than this")
    product_descriptive_bonus: float = Field(
        default=2.0, description="Bonus for sentences with descriptive verbs")
    product_long_sentence_chars: int = Field(
        default=150, ge=1, description="Sentences longer than this get the long bonus")
    product_long_sentence_bonus: float = Field(
        default=1.5, description="Bonus for long descriptive product sentences")
    article_heading_bonus: float = Field(
        default=3.0, description="Bonus for markdown heading sentences")
    article_conclusion_bonus: float = Field(
        default=2.0, description="Bonus for conclusion/summary sentences")
    video_key_bonus: float = Field(
        default=2.0, description="Bonus for sentences flagged important/key")
    position_decay: float = Field(
        default=0.1, ge=0.0, le=10.0, description="Decay factor of the position bonus")
    short_sentence_chars: int = Field(
        default=20, ge=0, description="Sentences shorter than this are penalized")
    short_sentence_factor: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Score multiplier for short sentences")
    long_sentence_chars: int = Field(
        default=300, ge=1, description="Sentences longer than this are penalized")
    long_sentence_factor: float = Field(
        default=0.7, ge=0.0, le=1.0, description="Score multiplier for long sentences")


class PriceSettings(BaseModel):
    """Main product price disambiguation."""

    context_chars: int = Field(
        default=50, ge=5, le=500, description="Context window on each side of a price")
    label_bonus: float = Field(
        default=10.0, description="Bonus for explicit price labels near a candidate")
    product_bonus: float = Field(
        default=5.0, description="Bonus for product words near a candidate")
    value_tiers: list[tuple[float, float]] = Field(
        default_factory=lambda: [(50.0, 3.0), (100.0, 2.0), (500.0, 1.0)],
        description="(threshold, bonus) pairs added when value exceeds threshold",
    )
    small_value_threshold: float = Field(
        default=10.0, ge=0.0, description="Values below this are likely shipping")
    small_value_penalty: float = Field(
        default=5.0, ge=0.0, description="Penalty for small values")
    discount_penalty: float = Field(
        default=3.0, ge=0.0, description="Penalty for discount/sale context")
    min_score: float = Field(
        default=0.0, description="Best candidate must score above this")
    fallback_min_value: float = Field(
        default=20.0, ge=0.0, description="Fallback candidates must be worth at least this")
    fallback_min_score: float = Field(
        default=-2.0, description="Fallback candidates must score at least this")


class SummarySettings(BaseModel):
    """Narrative summary lengths and descriptive filtering thresholds."""

    short_target_words: int = Field(default=150, ge=10, le=1000)
    short_max_sentences: int = Field(default=5, ge=1, le=50)
    article_target_words: int = Field(default=1000, ge=50, le=10000)
    article_max_sentences: int = Field(default=40, ge=1, le=500)
    default_target_words: int = Field(default=600, ge=50, le=10000)
    default_max_sentences: int = Field(default=25, ge=1, le=500)
    paragraph_target_words: int = Field(
        default=150, ge=20, le=2000, description="Target words per narrative paragraph")
    paragraph_min_sentences: int = Field(
        default=3, ge=1, le=50, description="Sentences a paragraph holds before it may break")
    descriptive_paragraph_min_chars: int = Field(
        default=100, ge=0, description="Descriptive paragraphs must exceed this length")
    min_descriptive_paragraphs: int = Field(
        default=3, ge=1, description="Paragraphs needed for the paragraph-based narrative")
    min_fallback_sentences: int = Field(
        default=10, ge=1, description="Sentences needed for the sentence-based narrative")
    max_fallback_sentences: int = Field(default=100, ge=1)
    fallback_short_chars: int = Field(
        default=150, ge=1, description="Short summary length when no sentence survives")
    fallback_detailed_chars: int = Field(
        default=400, ge=1, description="Detailed summary length when no sentence survives")
    placeholder: str = Field(
        default="Detailed product description is still being processed.",
        description="Detailed product summary when no descriptive content is found",
    )
    highlights_heading: str = Field(default="Key Highlights:")


class ExtractionSettings(BaseModel):
    """Caps and bounds for structured extraction and reviews."""

    max_key_points: int = Field(default=10, ge=1, le=10)
    max_insights: int = Field(default=5, ge=1, le=5)
    max_features: int = Field(default=10, ge=1, le=50)
    max_reviews: int = Field(default=10, ge=1, le=10)
    review_min_chars: int = Field(default=50, ge=0)
    review_max_chars: int = Field(default=1000, ge=1)
    highlight_sentence_pool: int = Field(
        default=30, ge=1, description="Top scored sentences scanned for highlights")
    highlight_min_score: float = Field(
        default=2.0, description="Highlights must come from sentences scoring above this")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None means console only.",
    )
    max_file_size_mb: int = Field(default=10, ge=1, le=100)
    backup_count: int = Field(default=3, ge=0, le=10)
    log_to_console: bool = Field(default=True)

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model containing all engine settings.

    Settings are loaded from YAML with environment variable overrides.
    """

    language_pack: str = Field(
        default="default",
        description="Name of the bundled language pack, or a path to a YAML pack",
    )
    text: TextSettings = Field(default_factory=TextSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    price: PriceSettings = Field(default_factory=PriceSettings)
    summary: SummarySettings = Field(default_factory=SummarySettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
