"""
Sentence segmentation, word tokenization and markdown text helpers.

Segmentation is rule based: line breaks always end a sentence, and
terminal punctuation followed by whitespace ends one unless the token
before it is a known abbreviation or the next fragment starts in lower
case. Word tokens are Unicode-aware so German umlauts and accented
letters stay inside words.
"""

import re
from typing import Iterable

from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


# Terminal punctuation, optionally followed by closing quotes/brackets
SENTENCE_BREAK = re.compile(r"(?<=[.!?…])([\"'”’»)\]]*)\s+")

# Paragraph separators
PARAGRAPH_SEP = re.compile(r"\n\s*\n")

# Unicode words, keeping inner apostrophes and hyphens
WORD_PATTERN = re.compile(r"\w+(?:['’-]\w+)*")

MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")
MARKDOWN_BOLD = re.compile(r"\*\*([^*]+)\*\*")
MARKDOWN_ITALIC = re.compile(r"\*([^*]+)\*")
MULTI_SPACE = re.compile(r" {2,}")

BULLET_PREFIXES = ("-", "•", "*")


def truncate(text: str, max_chars: int) -> str:
    """Cap text at max_chars characters. Never raises."""
    if len(text) <= max_chars:
        return text
    logger.debug(f"Truncating input from {len(text)} to {max_chars} chars")
    return text[:max_chars]


def segment_sentences(
    text: str,
    min_chars: int = 10,
    abbreviations: Iterable[str] = (),
) -> list[str]:
    """
    Split text into trimmed sentences.

    Args:
        text: Text to split
        min_chars: Sentences with trimmed length at or below this are dropped
        abbreviations: Lower-case tokens (with trailing period) that do not
            end a sentence

    Returns:
        Sentences in document order; may be empty
    """
    abbrevs = {a.lower() for a in abbreviations}
    sentences = []

    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        for sentence in _split_line(line, abbrevs):
            sentence = sentence.strip()
            if len(sentence) > min_chars:
                sentences.append(sentence)

    return sentences


def _split_line(line: str, abbreviations: set[str]) -> list[str]:
    """Split one line on sentence-ending punctuation."""
    fragments = []
    start = 0

    for match in SENTENCE_BREAK.finditer(line):
        end = match.end(1)
        fragments.append(line[start:end])
        start = match.end()

    fragments.append(line[start:])

    merged: list[str] = []
    for fragment in fragments:
        if not fragment:
            continue
        if merged and _continues(merged[-1], fragment, abbreviations):
            merged[-1] = f"{merged[-1]} {fragment}"
        else:
            merged.append(fragment)

    return merged


def _continues(previous: str, fragment: str, abbreviations: set[str]) -> bool:
    """Whether fragment continues the sentence ended by previous."""
    if fragment[0].islower():
        return True
    last_token = previous.rsplit(None, 1)[-1].lower()
    if last_token in abbreviations:
        return True
    # Single initials such as "J. Smith"
    return len(last_token) == 2 and last_token[0].isalpha() and last_token.endswith(".")


def tokenize_words(
    text: str,
    stop_words: Iterable[str] = (),
    min_chars: int = 2,
) -> list[str]:
    """
    Lower-case word tokens with short tokens and stop words removed.

    Args:
        text: Text to tokenize
        stop_words: Lower-case words to discard
        min_chars: Tokens with length at or below this are dropped

    Returns:
        Tokens in order of appearance
    """
    stops = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    return [
        word for word in WORD_PATTERN.findall(text.lower())
        if len(word) > min_chars and word not in stops
    ]


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, returning trimmed non-empty paragraphs."""
    return [p.strip() for p in PARAGRAPH_SEP.split(text) if p.strip()]


def split_lines(text: str, min_chars: int = 0) -> list[str]:
    """Trimmed non-empty lines longer than min_chars."""
    lines = (line.strip() for line in text.splitlines())
    return [line for line in lines if line and len(line) > min_chars]


def word_count(text: str) -> int:
    return len(text.split())


def heading_text(line: str) -> str | None:
    """Text of a markdown heading line, or None for other lines."""
    if not line.startswith("#"):
        return None
    return line.replace("#", "").strip()


def bullet_text(line: str) -> str | None:
    """Text of a bullet list line ("-", "•" or "*"), or None."""
    trimmed = line.strip()
    if not trimmed.startswith(BULLET_PREFIXES):
        return None
    # Bold markers are emphasis, not bullets
    if trimmed.startswith("**"):
        return None
    return trimmed[1:].strip()


def strip_markdown_links(text: str) -> str:
    """Replace [label](url) with label."""
    return MARKDOWN_LINK.sub(r"\1", text)


def strip_emphasis(text: str) -> str:
    """Remove **bold** and *italic* markers."""
    text = MARKDOWN_BOLD.sub(r"\1", text)
    return MARKDOWN_ITALIC.sub(r"\1", text)


def collapse_spaces(text: str) -> str:
    return MULTI_SPACE.sub(" ", text)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]
