"""
Language packs for Content Digest.

Keyword tables are data, not code: they are loaded from versioned YAML
files so hosts can ship additional languages and tests can substitute
minimal fixtures.
"""

from content_digest.language.packs import (
    LanguagePack,
    load_language_pack,
    contains_any,
    contains_word,
    count_present,
    last_word_position,
)

__all__ = [
    "LanguagePack",
    "load_language_pack",
    "contains_any",
    "contains_word",
    "count_present",
    "last_word_position",
]
