"""
Text processing module for Content Digest.

Provides the building blocks every analysis stage shares:
- Sentence segmentation and word tokenization
- Markdown cleanup helpers
- Price and spec-line patterns
- TF-IDF sentence scoring
"""

from content_digest.text.tokenizer import (
    truncate,
    segment_sentences,
    tokenize_words,
    split_paragraphs,
    split_lines,
    word_count,
    heading_text,
    bullet_text,
    strip_markdown_links,
    strip_emphasis,
    collapse_spaces,
    capitalize_first,
)
from content_digest.text.patterns import (
    PRICE_TOKEN,
    is_measurement_line,
    is_price_only,
    is_spec_line,
)
from content_digest.text.scorer import SentenceScorer

__all__ = [
    # Tokenizer
    "truncate",
    "segment_sentences",
    "tokenize_words",
    "split_paragraphs",
    "split_lines",
    "word_count",
    "heading_text",
    "bullet_text",
    "strip_markdown_links",
    "strip_emphasis",
    "collapse_spaces",
    "capitalize_first",
    # Patterns
    "PRICE_TOKEN",
    "is_measurement_line",
    "is_price_only",
    "is_spec_line",
    # Scoring
    "SentenceScorer",
]
