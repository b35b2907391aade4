"""
Customer review extraction.
"""

from content_digest.config.settings import ExtractionSettings
from content_digest.language import LanguagePack, contains_any, contains_word
from content_digest.text.tokenizer import (
    collapse_spaces,
    split_lines,
    split_paragraphs,
    strip_markdown_links,
)
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewExtractor:
    """
    Isolates review-like paragraphs from page text.

    Extraction only runs when the page mentions reviews at all. Sections
    are paragraphs, or single lines when the page has fewer than three
    paragraphs. A section qualifies when it uses review, first-person or
    rating language and is not navigation.

    Example:
        >>> extractor = ReviewExtractor(load_language_pack())
        >>> extractor.extract_reviews(page_text)
        ['Ich habe die Gitarre seit drei Monaten und bin begeistert ...']
    """

    MIN_PARAGRAPHS = 3

    def __init__(
        self,
        language: LanguagePack,
        settings: ExtractionSettings | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or ExtractionSettings()

    def extract_reviews(self, text: str) -> list[str]:
        """
        Extract distinct reviews in document order.

        Returns:
            Up to max_reviews cleaned review texts; empty when the page
            has no review section
        """
        if not contains_any(text.lower(), self.language.review_indicators):
            return []

        s = self.settings
        reviews: list[str] = []

        for section in self._sections(text):
            if not s.review_min_chars < len(section) < s.review_max_chars:
                continue
            if not self._is_review(section.lower()):
                continue

            cleaned = collapse_spaces(strip_markdown_links(section))
            if len(cleaned) > s.review_min_chars and cleaned not in reviews:
                reviews.append(cleaned)
            if len(reviews) >= s.max_reviews:
                break

        logger.debug(f"Extracted {len(reviews)} reviews")
        return reviews

    def _sections(self, text: str) -> list[str]:
        paragraphs = split_paragraphs(text)
        if len(paragraphs) >= self.MIN_PARAGRAPHS:
            return paragraphs
        return split_lines(text, min_chars=self.settings.review_min_chars)

    def _is_review(self, lower_section: str) -> bool:
        lang = self.language
        if contains_word(lower_section, lang.navigation_denylist):
            return False
        return (
            contains_any(lower_section, lang.review_indicators)
            or contains_any(lower_section, lang.review_language)
        )
