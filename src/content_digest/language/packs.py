"""
Versioned keyword tables for the heuristics.

Every multilingual signal/noise word list used by the classifier, the
scorer, the price resolver and the extractors lives in a LanguagePack.
Packs ship as YAML files under language/packs/ and can be replaced by a
user-supplied file or, in tests, by a minimal in-memory pack.
"""

import re
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable

import yaml
from pydantic import BaseModel, ValidationError

from content_digest.core.exceptions import ConfigurationError
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


class LanguagePack(BaseModel):
    """
    Keyword tables driving the heuristic pipeline.

    All entries are lower-case. Packs are frozen; a loaded pack is shared
    by every processor. Tables default to empty so a test fixture only
    needs to fill in the tables it exercises.
    """

    name: str = "custom"
    version: str = "0"

    # Tokenizer
    stop_words: tuple[str, ...] = ()
    abbreviations: tuple[str, ...] = ()

    # Classifier
    product_indicators: tuple[str, ...] = ()
    article_indicators: tuple[str, ...] = ()

    # Scorer
    description_words: tuple[str, ...] = ()
    descriptive_words: tuple[str, ...] = ()
    conclusion_words: tuple[str, ...] = ()
    video_emphasis_words: tuple[str, ...] = ()

    # Price resolver
    shipping_words: tuple[str, ...] = ()
    price_labels: tuple[str, ...] = ()
    product_labels: tuple[str, ...] = ()
    discount_words: tuple[str, ...] = ()

    # Structured extraction
    in_stock_phrases: tuple[str, ...] = ()
    out_of_stock_phrases: tuple[str, ...] = ()
    video_key_point_words: tuple[str, ...] = ()
    listing_control_words: tuple[str, ...] = ()
    spec_keywords: tuple[str, ...] = ()
    highlight_triggers: tuple[str, ...] = ()
    highlight_word_triggers: tuple[str, ...] = ()

    # Reviews
    review_indicators: tuple[str, ...] = ()
    review_language: tuple[str, ...] = ()
    navigation_denylist: tuple[str, ...] = ()

    # Narrative builder
    narrative_indicators: tuple[str, ...] = ()
    ui_denylist: tuple[str, ...] = ()
    review_snippet_words: tuple[str, ...] = ()
    spec_section_words: tuple[str, ...] = ()
    redundant_starters: tuple[str, ...] = ()
    paragraph_redundant_starters: tuple[str, ...] = ()

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_yaml(cls, path: Path | str) -> "LanguagePack":
        """
        Load a pack from a YAML file.

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError("Language pack not found", path=str(path))
        return cls._parse(path.read_text(encoding="utf-8"), str(path))

    @classmethod
    def _parse(cls, raw: str, source: str) -> "LanguagePack":
        try:
            data = yaml.safe_load(raw) or {}
            if not isinstance(data, dict):
                raise ConfigurationError(
                    "Language pack must contain a mapping", path=source)
            return cls(**data)
        except (yaml.YAMLError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid language pack: {e}", path=source) from e


def load_language_pack(name: str = "default") -> LanguagePack:
    """
    Load a bundled language pack by name, or a pack file by path.

    Loaded packs are cached per name.

    Raises:
        ConfigurationError: If no such pack exists
    """
    return _load_pack(name)


@lru_cache(maxsize=8)
def _load_pack(name: str) -> LanguagePack:
    if name.endswith((".yaml", ".yml")):
        return LanguagePack.from_yaml(name)

    resource = resources.files("content_digest.language").joinpath(
        "packs", f"{name}.yaml")
    if not resource.is_file():
        raise ConfigurationError(
            f"Unknown language pack: {name}", details={"pack": name})

    pack = LanguagePack._parse(resource.read_text(encoding="utf-8"), name)
    logger.debug(f"Loaded language pack {pack.name} v{pack.version}")
    return pack


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """Case-sensitive substring test; callers pass lower-cased text."""
    return any(term in text for term in terms)


def count_present(text: str, terms: Iterable[str]) -> int:
    """Number of distinct terms occurring as substrings of text."""
    return sum(1 for term in set(terms) if term in text)


@lru_cache(maxsize=64)
def _word_pattern(terms: tuple[str, ...]) -> re.Pattern | None:
    if not terms:
        return None
    stripped = sorted({t.strip() for t in terms if t.strip()}, key=lambda t: (-len(t), t))
    if not stripped:
        return None
    alternatives = []
    for term in stripped:
        # Boundaries only where the term itself starts or ends with a word char
        head = r"(?<!\w)" if re.match(r"\w", term) else ""
        tail = r"(?!\w)" if re.match(r"\w", term[-1]) else ""
        alternatives.append(f"{head}{re.escape(term)}{tail}")
    return re.compile("|".join(alternatives))


def contains_word(text: str, terms: Iterable[str]) -> bool:
    """
    Whole-word test for any of the terms.

    Short verbs like "ist" or "is" would otherwise match inside
    unrelated words ("listing", "this").
    """
    pattern = _word_pattern(tuple(terms))
    return bool(pattern and pattern.search(text))


def last_word_position(text: str, terms: Iterable[str]) -> int:
    """Start offset of the last whole-word match of any term, or -1."""
    pattern = _word_pattern(tuple(terms))
    if pattern is None:
        return -1
    position = -1
    for match in pattern.finditer(text):
        position = match.start()
    return position
