"""
TF-IDF sentence scoring.

Each sentence is treated as a "document" within the page. A sentence's
base score is the sum over its terms of normalized term frequency times
ln(N / df), where N is the number of sentences and df the number of
sentences containing the term. Content-type-aware adjustments, a position
bonus and length penalties are applied on top.
"""

import math
from collections import Counter

from content_digest.config.settings import ScoringSettings, TextSettings
from content_digest.core.models import ContentType, ScoredSentence
from content_digest.language import LanguagePack, contains_any, contains_word
from content_digest.text.patterns import is_price_only, is_spec_line
from content_digest.text.tokenizer import tokenize_words
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


class SentenceScorer:
    """
    Scores sentences of a single document.

    Scoring is a pure function of the sentence list, the content type and
    the configured tables, so identical input always yields identical
    output.

    Example:
        >>> scorer = SentenceScorer(language=load_language_pack())
        >>> ranked = scorer.score(sentences, ContentType.ARTICLE)
        >>> ranked[0].text
    """

    def __init__(
        self,
        language: LanguagePack,
        settings: ScoringSettings | None = None,
        text_settings: TextSettings | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or ScoringSettings()
        self.text_settings = text_settings or TextSettings()
        self._stop_words = frozenset(language.stop_words)

    def score(
        self,
        sentences: list[str],
        content_type: ContentType,
    ) -> list[ScoredSentence]:
        """
        Score and rank sentences.

        Args:
            sentences: Sentences in document order
            content_type: Content type steering the adjustments

        Returns:
            ScoredSentence list sorted by descending score. Equal scores
            keep document order.
        """
        if not sentences:
            return []

        tokenized = [
            tokenize_words(s, self._stop_words, self.text_settings.min_token_chars)
            for s in sentences
        ]
        document_frequency: Counter[str] = Counter()
        for tokens in tokenized:
            document_frequency.update(set(tokens))

        total = len(sentences)
        scored = []

        for index, (sentence, tokens) in enumerate(zip(sentences, tokenized)):
            score = self._tf_idf(tokens, document_frequency, total)
            score += self._content_adjustment(sentence, content_type)
            score += 1.0 / (1.0 + index * self.settings.position_decay)
            score *= self._length_factor(sentence)
            scored.append(ScoredSentence(text=sentence, score=score, index=index))

        scored.sort(key=lambda s: -s.score)

        logger.debug(
            f"Scored {total} sentences ({content_type.value}), "
            f"top score {scored[0].score:.3f}"
        )
        return scored

    @staticmethod
    def _tf_idf(tokens: list[str], document_frequency: Counter, total: int) -> float:
        if not tokens:
            return 0.0
        word_count = len(tokens)
        score = 0.0
        for term, count in Counter(tokens).items():
            idf = math.log(total / document_frequency[term])
            score += (count / word_count) * idf
        return score

    def _content_adjustment(self, sentence: str, content_type: ContentType) -> float:
        s = self.settings
        lang = self.language
        lower = sentence.lower()
        adjustment = 0.0

        if content_type == ContentType.PRODUCT:
            if contains_any(lower, lang.description_words):
                adjustment += s.product_description_bonus
            if is_price_only(sentence):
                adjustment -= s.product_price_only_penalty
            if is_spec_line(sentence, s.product_spec_max_line_chars, s.product_spec_max_key_chars):
                adjustment -= s.product_spec_line_penalty
            if contains_word(lower, lang.descriptive_words):
                adjustment += s.product_descriptive_bonus
            if len(sentence) > s.product_long_sentence_chars:
                adjustment += s.product_long_sentence_bonus

        elif content_type == ContentType.ARTICLE:
            if sentence.startswith("#"):
                adjustment += s.article_heading_bonus
            if contains_any(lower, lang.conclusion_words):
                adjustment += s.article_conclusion_bonus

        elif content_type == ContentType.VIDEO:
            if contains_any(lower, lang.video_emphasis_words):
                adjustment += s.video_key_bonus

        return adjustment

    def _length_factor(self, sentence: str) -> float:
        length = len(sentence)
        if length < self.settings.short_sentence_chars:
            return self.settings.short_sentence_factor
        if length > self.settings.long_sentence_chars:
            return self.settings.long_sentence_factor
        return 1.0
