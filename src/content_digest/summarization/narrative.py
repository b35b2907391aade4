"""
Narrative summary construction.

Turns scored sentences into flowing prose. The short summary is the top
sentences up to ~150 words. The detailed summary depends on the content
type: products get a narrative built only from descriptive paragraphs,
everything else gets a longer selection of top sentences followed by a
"Key Highlights" bullet block.
"""

import re
from typing import Iterable

from content_digest.config.settings import SummarySettings, TextSettings
from content_digest.core.models import ContentType, ScoredSentence, Summaries
from content_digest.language import LanguagePack, contains_any, contains_word
from content_digest.text.patterns import (
    PRICE_TOKEN,
    is_measurement_line,
    is_price_only,
    is_spec_line,
)
from content_digest.text.tokenizer import (
    capitalize_first,
    collapse_spaces,
    segment_sentences,
    split_lines,
    split_paragraphs,
    strip_emphasis,
    strip_markdown_links,
    word_count,
)
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)

TERMINAL_PUNCTUATION = (".", "!", "?")
SENTENCE_PARTS = re.compile(r"[.!?]")
SPACE_BEFORE_PUNCTUATION = re.compile(r" ([.,:;])")
QUOTE_VARIANTS = re.compile(r"„|“|”|''")
LEADING_BULLETS = ("- ", "• ", "* ")


def _strip_starter(sentence: str, starters: Iterable[str]) -> str:
    for starter in starters:
        if sentence.startswith(starter):
            return sentence[len(starter):]
    return sentence


class NarrativeSummaryBuilder:
    """
    Builds short and detailed summaries from scored sentences.

    Example:
        >>> builder = NarrativeSummaryBuilder(load_language_pack())
        >>> summaries = builder.build_summaries(scored, ContentType.ARTICLE, text)
        >>> summaries.short
    """

    def __init__(
        self,
        language: LanguagePack,
        settings: SummarySettings | None = None,
        text_settings: TextSettings | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or SummarySettings()
        self.text_settings = text_settings or TextSettings()

    def build_summaries(
        self,
        scored: list[ScoredSentence],
        content_type: ContentType,
        text: str,
        key_points: list[str] | None = None,
    ) -> Summaries:
        """
        Build both summaries.

        Args:
            scored: Sentences sorted by descending score
            content_type: Detected content type
            text: Document text, used by the product narrative and when no
                sentence survived segmentation
            key_points: Key points for the "Key Highlights" block of
                non-product summaries

        Returns:
            Summaries with short and detailed text
        """
        s = self.settings

        if not scored:
            logger.debug("No sentences, falling back to text prefixes")
            return Summaries(
                short=text[:s.fallback_short_chars].strip(),
                detailed=text[:s.fallback_detailed_chars].strip(),
            )

        short = self.build_flowing_summary(scored, s.short_target_words, s.short_max_sentences)

        if content_type == ContentType.PRODUCT:
            detailed = self.build_narrative_product_description(text)
        else:
            if content_type == ContentType.ARTICLE:
                target, cap = s.article_target_words, s.article_max_sentences
            else:
                target, cap = s.default_target_words, s.default_max_sentences
            narrative = self.build_flowing_summary(scored, target, cap)
            detailed = self._with_highlights(narrative, key_points)

        logger.debug(
            f"Built summaries: short {word_count(short)} words, "
            f"detailed {word_count(detailed)} words"
        )
        return Summaries(short=short, detailed=detailed)

    def build_flowing_summary(
        self,
        scored: list[ScoredSentence],
        target_words: int,
        max_sentences: int,
    ) -> str:
        """
        Take top sentences until the next one would exceed target_words.

        When even the top sentence is too long, it is truncated to
        target_words words and marked with "...".
        """
        selected = []
        total = 0

        for sentence in scored[:max_sentences]:
            count = word_count(sentence.text)
            if total + count > target_words:
                break
            selected.append(sentence.text)
            total += count

        if not selected and scored:
            words = scored[0].text.split()
            truncated = " ".join(words[:target_words])
            return truncated + ("..." if len(words) > target_words else "")

        return self.create_flowing_text(selected)

    def create_flowing_text(self, sentences: list[str]) -> str:
        """
        Join sentences into one block of prose.

        Redundant connective starters are stripped from all but the first
        sentence and every sentence ends with terminal punctuation.
        """
        flowing = []
        for index, sentence in enumerate(sentences):
            cleaned = sentence.strip()
            if index > 0:
                cleaned = capitalize_first(
                    _strip_starter(cleaned, self.language.redundant_starters))
            if not cleaned:
                continue
            if not cleaned.endswith(TERMINAL_PUNCTUATION):
                cleaned += "."
            flowing.append(cleaned)

        text = capitalize_first(" ".join(flowing))
        return collapse_spaces(text).strip()

    def build_narrative_product_description(self, text: str) -> str:
        """
        Narrative built only from descriptive product copy.

        Spec tables, prices, UI labels and review snippets are left out.
        Falls back to descriptive sentences from the whole text and finally
        to a placeholder when the page has no usable copy.
        """
        s = self.settings

        paragraphs = split_paragraphs(text)
        if len(paragraphs) < 5:
            for line in split_lines(text, min_chars=50):
                if line not in paragraphs:
                    paragraphs.append(line)

        descriptive = [p for p in paragraphs if self.is_descriptive_paragraph(p)]

        if len(descriptive) >= s.min_descriptive_paragraphs:
            logger.debug(f"Product narrative from {len(descriptive)} descriptive paragraphs")
            return self.create_narrative_paragraphs(self._paragraph_sentences(descriptive))

        narrative = [
            sentence for sentence in self._segment(text)
            if self._is_narrative_sentence(sentence)
        ]
        if len(narrative) >= s.min_fallback_sentences:
            logger.debug(f"Product narrative from {len(narrative)} descriptive sentences")
            return self.create_narrative_paragraphs(narrative[:s.max_fallback_sentences])

        if descriptive:
            sentences = self._paragraph_sentences(descriptive)
            if sentences:
                logger.debug(f"Product narrative from {len(descriptive)} short paragraphs")
                return self.create_narrative_paragraphs(sentences)

        logger.debug("No descriptive product copy found")
        return s.placeholder

    def is_descriptive_paragraph(self, paragraph: str) -> bool:
        """Whether a paragraph reads as descriptive product copy."""
        trimmed = paragraph.strip()
        lower = trimmed.lower()
        lang = self.language

        if len(trimmed) <= self.settings.descriptive_paragraph_min_chars:
            return False

        # Spec tables: several colons behind short keys
        if trimmed.count(":") > 2:
            keys = [part.strip() for part in trimmed.split(":")[:3]]
            if sum(1 for key in keys if 0 < len(key) < 30) >= 2:
                return False

        if PRICE_TOKEN.search(trimmed) and len(trimmed) < 200:
            return False
        if contains_word(lower, lang.ui_denylist):
            return False
        if contains_any(lower, lang.review_snippet_words) and len(trimmed) < 300:
            return False
        if contains_any(lower, lang.spec_section_words) and len(trimmed) < 500:
            return False

        if not contains_word(lower, lang.narrative_indicators):
            return False
        parts = [p for p in SENTENCE_PARTS.split(trimmed) if p.strip()]
        return len(parts) >= 2 or len(trimmed) > 200

    def _segment(self, text: str) -> list[str]:
        return segment_sentences(
            text,
            min_chars=self.text_settings.min_sentence_chars,
            abbreviations=self.language.abbreviations,
        )

    def _paragraph_sentences(self, paragraphs: list[str]) -> list[str]:
        sentences = []
        for paragraph in paragraphs:
            for sentence in self._segment(paragraph):
                if not 30 < len(sentence) < 500:
                    continue
                if self._is_table_line(sentence):
                    continue
                sentences.append(sentence)
        return sentences

    @staticmethod
    def _is_table_line(sentence: str) -> bool:
        """Spec lines, measurements and bare prices."""
        stripped = sentence.strip()
        return (
            is_spec_line(stripped)
            or is_measurement_line(stripped)
            or is_price_only(stripped)
        )

    def _is_narrative_sentence(self, sentence: str) -> bool:
        if not 50 < len(sentence) < 600:
            return False
        if self._is_table_line(sentence):
            return False
        lower = sentence.lower()
        if contains_word(lower, self.language.ui_denylist):
            return False
        return contains_word(lower, self.language.narrative_indicators) or len(sentence) > 150

    def create_narrative_paragraphs(self, sentences: list[str]) -> str:
        """
        Group sentences into paragraphs of about paragraph_target_words.

        A paragraph only breaks once it holds paragraph_min_sentences
        sentences. Paragraphs are separated by blank lines.
        """
        s = self.settings
        paragraphs = []
        current: list[str] = []
        current_words = 0

        for sentence in sentences:
            count = word_count(sentence)
            if (
                current_words > 0
                and current_words + count > s.paragraph_target_words
                and len(current) >= s.paragraph_min_sentences
            ):
                paragraphs.append(self.create_flowing_paragraph(current))
                current = []
                current_words = 0
            current.append(sentence)
            current_words += count

        if current:
            paragraphs.append(self.create_flowing_paragraph(current))

        return "\n\n".join(p for p in paragraphs if p)

    def create_flowing_paragraph(self, sentences: list[str]) -> str:
        """
        Clean and join the sentences of one narrative paragraph.

        Drops fragments under 20 characters and strips connective starters
        (English and German), markdown links and emphasis, leading bullets
        and wrapping quotes.
        """
        flowing = []

        for index, sentence in enumerate(sentences):
            cleaned = sentence.strip()
            if len(cleaned) < 20:
                continue

            if index > 0:
                cleaned = _strip_starter(cleaned, self.language.paragraph_redundant_starters)

            cleaned = strip_emphasis(strip_markdown_links(cleaned))
            if cleaned.startswith(LEADING_BULLETS):
                cleaned = cleaned[2:]
            if len(cleaned) > 2 and cleaned.startswith('"') and cleaned.endswith('"'):
                cleaned = cleaned[1:-1]

            if not cleaned:
                continue
            if not cleaned.endswith(TERMINAL_PUNCTUATION + (":",)):
                cleaned += "."
            flowing.append(capitalize_first(cleaned))

        if not flowing:
            return ""

        text = collapse_spaces(" ".join(flowing))
        text = SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
        text = QUOTE_VARIANTS.sub('"', text)
        return capitalize_first(text).strip()

    def _with_highlights(self, narrative: str, key_points: list[str] | None) -> str:
        if not key_points:
            return narrative
        bullets = "\n".join(f"• {point}" for point in key_points)
        return f"{narrative}\n\n\n{self.settings.highlights_heading}\n{bullets}"
