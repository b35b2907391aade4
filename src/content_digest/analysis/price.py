"""
Main product price disambiguation.

Product pages mention many amounts: the product price, shipping costs,
crossed-out list prices, financing rates. Taking the first currency
match frequently yields the shipping cost, so every candidate is scored
on its surrounding context and the best one wins.
"""

import re
from dataclasses import dataclass

from content_digest.config.settings import PriceSettings
from content_digest.language import (
    LanguagePack,
    contains_any,
    contains_word,
    last_word_position,
)
from content_digest.text.patterns import CURRENCY_SYMBOLS, PRICE_TOKEN
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)

# Discount percentages such as "-20%" or "- 15 %"
DISCOUNT_PERCENT = re.compile(r"-\s*\d+\s*%")


def parse_amount(token: str) -> float | None:
    """
    Parse the numeric value of a price token.

    Handles European (1.299,00) and US (1,299.00) notation. When both
    separators occur, the last one is the decimal separator. A single
    separator followed by a group of three or more digits is a thousands
    separator.

    Example:
        >>> parse_amount("1.299,00 €")
        1299.0
        >>> parse_amount("$1,299.99")
        1299.99
        >>> parse_amount("€ 4,99")
        4.99
    """
    number = "".join(ch for ch in token if ch not in CURRENCY_SYMBOLS and not ch.isspace())
    if not number:
        return None

    if "," in number and "." in number:
        decimal = "," if number.rfind(",") > number.rfind(".") else "."
        thousands = "." if decimal == "," else ","
        number = number.replace(thousands, "").replace(decimal, ".")
    elif "," in number or "." in number:
        separator = "," if "," in number else "."
        parts = number.split(separator)
        if len(parts) > 2 or len(parts[1]) >= 3:
            number = number.replace(separator, "")
        else:
            number = number.replace(separator, ".")

    try:
        return float(number)
    except ValueError:
        return None


@dataclass
class PriceCandidate:
    """A currency-tagged amount found in the text."""

    text: str
    value: float
    start: int
    context: str
    score: float = 0.0


class PriceResolver:
    """
    Resolves the main product price of a page.

    Example:
        >>> resolver = PriceResolver(load_language_pack())
        >>> resolver.resolve_main_price("Preis: 1.299,00 € ... Versand: 4,99 €")
        '1.299,00 €'
    """

    def __init__(
        self,
        language: LanguagePack,
        settings: PriceSettings | None = None,
    ) -> None:
        self.language = language
        self.settings = settings or PriceSettings()

    def resolve_main_price(self, text: str) -> str | None:
        """
        Pick the most likely product price.

        Returns:
            The price token as written in the text, or None
        """
        candidates = self.find_candidates(text)
        if not candidates:
            logger.debug("No price candidates found")
            return None

        ranked = sorted(candidates, key=lambda c: -c.score)
        best = ranked[0]
        if best.score > self.settings.min_score:
            logger.debug(f"Main price {best.text!r} (score {best.score:.1f})")
            return best.text

        fallback = [
            c for c in candidates
            if c.value >= self.settings.fallback_min_value
            and c.score >= self.settings.fallback_min_score
        ]
        if fallback:
            largest = max(fallback, key=lambda c: c.value)
            logger.debug(f"Main price {largest.text!r} from fallback (value {largest.value})")
            return largest.text

        logger.debug(f"No price among {len(candidates)} candidates qualified")
        return None

    def find_candidates(self, text: str) -> list[PriceCandidate]:
        """
        Scored, non-shipping price candidates in document order.
        """
        window = self.settings.context_chars
        candidates = []

        for match in PRICE_TOKEN.finditer(text):
            value = parse_amount(match.group())
            if value is None:
                continue

            start, end = match.start(), match.end()
            context = text[max(0, start - window):end + window].lower()

            if DISCOUNT_PERCENT.search(context):
                continue
            if contains_any(context, self.language.shipping_words):
                preceding = text[max(0, start - window):start].lower()
                if not self._labelled_as_price(preceding):
                    continue

            candidate = PriceCandidate(
                text=match.group().strip(),
                value=value,
                start=start,
                context=context,
            )
            candidate.score = self._score(candidate)
            candidates.append(candidate)

        return candidates

    def _labelled_as_price(self, preceding: str) -> bool:
        """Whether the closest label before an amount is a price label."""
        label = last_word_position(preceding, self.language.price_labels)
        if label < 0:
            return False
        shipping = max((preceding.rfind(w) for w in self.language.shipping_words), default=-1)
        return label > shipping

    def _score(self, candidate: PriceCandidate) -> float:
        s = self.settings
        context = candidate.context
        score = 0.0

        if contains_word(context, self.language.price_labels):
            score += s.label_bonus
        if contains_any(context, self.language.product_labels):
            score += s.product_bonus

        for threshold, bonus in s.value_tiers:
            if candidate.value > threshold:
                score += bonus

        if candidate.value < s.small_value_threshold:
            score -= s.small_value_penalty
        if contains_any(context, self.language.discount_words):
            score -= s.discount_penalty

        return score
