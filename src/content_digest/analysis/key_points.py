"""
Comprehensive key point extraction.

Runs after scoring and produces the richer key point list that replaces
the structured extractor's key points. Products get price, availability,
features, whitelisted specs and concise highlight phrases; other content
types get headings plus the best scored sentences.
"""

from content_digest.config.settings import ExtractionSettings
from content_digest.core.models import ContentType, ScoredSentence
from content_digest.analysis.price import PriceResolver
from content_digest.analysis.structured import (
    StructuredDataExtractor,
    availability_status,
    extract_headings,
    top_words,
)
from content_digest.language import LanguagePack, contains_any
from content_digest.text.tokenizer import bullet_text, split_lines
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


def _unique(items: list[str]) -> list[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class KeyPointExtractor:
    """
    Builds the final key point list for a document.

    Example:
        >>> extractor = KeyPointExtractor(load_language_pack())
        >>> extractor.extract_comprehensive_key_points(
        ...     ContentType.PRODUCT, text, scored)
        ['Price: 1.299,00 €', 'Available in stock', 'Korpus: Mahagoni, massiv']
    """

    TOP_SENTENCES = 8
    MAX_FEATURES = 5
    MAX_SPECS = 8
    HIGHLIGHT_MAX_CHARS = 80
    PHRASE_MAX_CHARS = 100

    def __init__(
        self,
        language: LanguagePack,
        settings: ExtractionSettings | None = None,
        price_resolver: PriceResolver | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or ExtractionSettings()
        self.price_resolver = price_resolver or PriceResolver(language)

    def extract_comprehensive_key_points(
        self,
        content_type: ContentType,
        text: str,
        scored: list[ScoredSentence],
    ) -> list[str]:
        """
        Extract deduplicated key points, capped at max_key_points.

        Args:
            content_type: Detected content type
            text: Document text
            scored: Sentences sorted by descending score

        Returns:
            Key points in priority order; may be empty
        """
        if content_type == ContentType.PRODUCT:
            points = self._product_points(text, scored)
        elif content_type == ContentType.ARTICLE:
            points = extract_headings(text, min_chars=5, max_chars=100)
            points += self._top_sentences(scored, min_chars=30)
        elif content_type == ContentType.VIDEO:
            points = top_words(text)
            points += self._top_sentences(scored, min_chars=20)
        else:
            points = extract_headings(text, min_chars=5)
            points += self._top_sentences(scored, min_chars=20)

        points = _unique(points)[:self.settings.max_key_points]
        logger.debug(f"Extracted {len(points)} key points ({content_type.value})")
        return points

    def _top_sentences(self, scored: list[ScoredSentence], min_chars: int) -> list[str]:
        result = []
        for sentence in scored[:self.TOP_SENTENCES]:
            cleaned = sentence.text.strip()
            if min_chars < len(cleaned) < 150:
                result.append(cleaned)
        return result

    def _product_points(self, text: str, scored: list[ScoredSentence]) -> list[str]:
        points = []

        price = self.price_resolver.resolve_main_price(text)
        if price:
            points.append(f"Price: {price}")

        availability = availability_status(text.lower(), self.language)
        if availability == "in_stock":
            points.append("Available in stock")
        elif availability == "out_of_stock":
            points.append("Currently out of stock")

        features = StructuredDataExtractor.bullet_features(text, max_chars=150)
        points.extend(features[:self.MAX_FEATURES])
        points.extend(self.spec_lines(text)[:self.MAX_SPECS])
        points.extend(self.highlights(scored))

        return points

    def spec_lines(self, text: str) -> list[str]:
        """
        "Key: Value" lines whose text mentions a whitelisted spec keyword.
        """
        specs: list[str] = []
        for line in split_lines(text):
            line = bullet_text(line) or line
            if ":" not in line or not 15 < len(line) < 150:
                continue
            parts = line.split(":")
            if len(parts) != 2:
                continue
            key, value = parts[0].strip(), parts[1].strip()
            if len(key) >= 50 or not 5 < len(value) < 100:
                continue
            spec = f"{key}: {value}"
            if spec not in specs and contains_any(spec.lower(), self.language.spec_keywords):
                specs.append(spec)
        return specs

    def highlights(self, scored: list[ScoredSentence]) -> list[str]:
        """
        Concise phrases from high scoring sentences that mention a
        highlight trigger such as "handmade" or "limited".

        Sentences up to 80 characters are kept whole. Longer ones are cut
        to a window from two words before the first trigger word to ten
        words after it, or to their first ten words.
        """
        s = self.settings
        phrases: list[str] = []

        for sentence in scored[:s.highlight_sentence_pool]:
            if sentence.score <= s.highlight_min_score:
                continue
            cleaned = sentence.text.strip()
            if not contains_any(cleaned.lower(), self.language.highlight_triggers):
                continue

            if len(cleaned) <= self.HIGHLIGHT_MAX_CHARS:
                phrase = cleaned
            else:
                phrase = self._phrase_window(cleaned.split())

            if phrase and len(phrase) <= self.PHRASE_MAX_CHARS and phrase not in phrases:
                phrases.append(phrase)

        return phrases

    def _phrase_window(self, words: list[str]) -> str:
        for index, word in enumerate(words):
            if contains_any(word.lower(), self.language.highlight_word_triggers):
                return " ".join(words[max(0, index - 2):index + 10])
        if len(words) > 5:
            return " ".join(words[:10])
        return ""
