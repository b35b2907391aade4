"""
Structured data extraction.

One strategy per content type, each producing structured key/value
facts, key points and actionable insights:
- product: price, availability, features, description
- article: author, published date, headings, paragraph openers
- video: topics, key moments
- listing: result count, filter controls
- general: headings
"""

import re
from collections import Counter
from typing import Callable

from content_digest.config.settings import ExtractionSettings
from content_digest.core.metadata import MetaValue
from content_digest.core.models import ContentType, ExtractedData, StrategyOutput
from content_digest.analysis.price import PriceResolver
from content_digest.language import LanguagePack, contains_any
from content_digest.text.tokenizer import (
    bullet_text,
    heading_text,
    split_lines,
    split_paragraphs,
    tokenize_words,
)
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)

# "120 results", "48 Products"
RESULT_COUNT = re.compile(r"\d+\s+(?:results|items|products|offers)", re.IGNORECASE)


def extract_headings(text: str, min_chars: int = 5, max_chars: int | None = None) -> list[str]:
    """
    Markdown heading texts in document order.

    Headings must be longer than min_chars and, when max_chars is given,
    shorter than max_chars.
    """
    headings = []
    for line in split_lines(text):
        heading = heading_text(line)
        if heading is None or len(heading) <= min_chars:
            continue
        if max_chars is not None and len(heading) >= max_chars:
            continue
        headings.append(heading)
    return headings


def availability_status(lower_text: str, language: LanguagePack) -> str | None:
    """
    "out_of_stock", "in_stock" or None.

    Out-of-stock phrases are checked first since "unavailable" contains
    "available".
    """
    if contains_any(lower_text, language.out_of_stock_phrases):
        return "out_of_stock"
    if contains_any(lower_text, language.in_stock_phrases):
        return "in_stock"
    return None


def top_words(text: str, count: int = 5, min_chars: int = 4) -> list[str]:
    """
    Most frequent words longer than min_chars, capitalized.

    Ties are broken alphabetically so the result is reproducible.
    """
    counts = Counter(tokenize_words(text, min_chars=min_chars))
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [word.capitalize() for word, _ in ranked[:count]]


class StructuredDataExtractor:
    """
    Extracts per content type structured data.

    Every strategy tolerates missing or malformed metadata and returns
    empty collections rather than raising.

    Example:
        >>> extractor = StructuredDataExtractor(load_language_pack())
        >>> data = extractor.extract(ContentType.LISTING, "Showing 120 results", None)
        >>> data.structured_data
        {'count': '120 results'}
    """

    def __init__(
        self,
        language: LanguagePack,
        settings: ExtractionSettings | None = None,
        price_resolver: PriceResolver | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or ExtractionSettings()
        self.price_resolver = price_resolver or PriceResolver(language)

        self._strategies: dict[ContentType, Callable[[str, MetaValue], StrategyOutput]] = {
            ContentType.PRODUCT: self.extract_product,
            ContentType.ARTICLE: self.extract_article,
            ContentType.VIDEO: self.extract_video,
            ContentType.LISTING: self.extract_listing,
            ContentType.GENERAL: self.extract_general,
        }

    def extract(
        self,
        content_type: ContentType,
        text: str,
        metadata: MetaValue | dict | None = None,
    ) -> ExtractedData:
        """
        Run the strategy for content_type.

        Args:
            content_type: Detected content type
            text: Document text
            metadata: Scraper metadata, passed through to the result

        Returns:
            ExtractedData with empty collections stored as None
        """
        meta = MetaValue.from_json(metadata)
        output = self._strategies[content_type](text, meta)

        key_points = output.key_points[:self.settings.max_key_points]
        insights = output.insights[:self.settings.max_insights]
        passthrough = meta.to_json() if meta.as_map() else None

        logger.debug(
            f"Extracted {len(output.structured)} facts, {len(key_points)} key points, "
            f"{len(insights)} insights ({content_type.value})"
        )

        return ExtractedData(
            type=content_type,
            structured_data=output.structured or None,
            key_points=key_points or None,
            actionable_insights=insights or None,
            metadata=passthrough,
        )

    def extract_product(self, text: str, metadata: MetaValue) -> StrategyOutput:
        output = StrategyOutput()
        lower = text.lower()

        price = self.price_resolver.resolve_main_price(text)
        if price:
            output.structured["price"] = price
            output.key_points.append(f"Price: {price}")

        availability = availability_status(lower, self.language)
        if availability == "out_of_stock":
            output.structured["availability"] = availability
            output.insights.append("Product is currently out of stock")
        elif availability == "in_stock":
            output.structured["availability"] = availability
            output.insights.append("Product is currently available")

        features = self.bullet_features(text, max_chars=200)
        if features:
            output.structured["features"] = features[:self.settings.max_features]
            output.key_points.extend(features[:5])

        long_paragraphs = [p for p in split_paragraphs(text) if len(p) > 100]
        longest = sorted(long_paragraphs, key=len, reverse=True)[:3]
        description = "\n\n".join(longest)
        if len(description) > 200:
            output.structured["description"] = description
            opening = description[:300]
            if len(opening) > 100:
                suffix = "..." if len(description) > 300 else ""
                output.key_points.append(opening + suffix)

        return output

    def extract_article(self, text: str, metadata: MetaValue) -> StrategyOutput:
        output = StrategyOutput()

        meta_tags = metadata.get("metaTags")
        author = meta_tags.get("author").as_str()
        if author:
            output.structured["author"] = author
        published = meta_tags.get("date").as_str() or meta_tags.get("published_time").as_str()
        if published:
            output.structured["published_date"] = published

        output.key_points.extend(extract_headings(text, min_chars=5, max_chars=100))

        for paragraph in split_paragraphs(text)[:5]:
            opener = paragraph.split(". ")[0].strip()
            if 20 < len(opener) < 200:
                output.key_points.append(opener)

        return output

    def extract_video(self, text: str, metadata: MetaValue) -> StrategyOutput:
        output = StrategyOutput()

        topics = top_words(text)
        if topics:
            output.structured["topics"] = topics
            output.key_points.extend(topics)

        for sentence in text.split(". "):
            sentence = sentence.strip()
            if not 20 < len(sentence) < 200:
                continue
            if contains_any(sentence.lower(), self.language.video_key_point_words):
                output.key_points.append(sentence)

        return output

    def extract_listing(self, text: str, metadata: MetaValue) -> StrategyOutput:
        output = StrategyOutput()

        match = RESULT_COUNT.search(text)
        if match:
            output.structured["count"] = match.group()
            output.key_points.append(match.group().title())

        filters = [
            line for line in split_lines(text)
            if contains_any(line.lower(), self.language.listing_control_words)
            and 5 < len(line) < 100
        ]
        if filters:
            output.structured["filters"] = filters[:5]

        return output

    def extract_general(self, text: str, metadata: MetaValue) -> StrategyOutput:
        return StrategyOutput(key_points=extract_headings(text, min_chars=5))

    @staticmethod
    def bullet_features(text: str, max_chars: int = 200) -> list[str]:
        """Distinct bullet-list items longer than 10 and shorter than max_chars."""
        features: list[str] = []
        for line in split_lines(text):
            feature = bullet_text(line)
            if feature and 10 < len(feature) < max_chars and feature not in features:
                features.append(feature)
        return features
