"""
Tests for text tokenizer module.

Tests sentence segmentation, word tokenization and markdown helpers.
"""

import pytest

from content_digest.text import (
    bullet_text,
    capitalize_first,
    collapse_spaces,
    heading_text,
    is_measurement_line,
    is_price_only,
    is_spec_line,
    segment_sentences,
    split_lines,
    split_paragraphs,
    strip_emphasis,
    strip_markdown_links,
    tokenize_words,
    truncate,
)


class TestSegmentSentences:
    """Tests for sentence segmentation."""

    def test_splits_on_terminal_punctuation(self):
        """Sentences end at . ! and ?"""
        text = "The first sentence is here. Is this the second one? Yes, it is the third!"

        sentences = segment_sentences(text)

        assert sentences == [
            "The first sentence is here.",
            "Is this the second one?",
            "Yes, it is the third!",
        ]

    def test_drops_short_fragments(self):
        """Sentences of 10 characters or fewer are noise."""
        text = "Buy now. This sentence is long enough to keep."

        sentences = segment_sentences(text)

        assert sentences == ["This sentence is long enough to keep."]

    def test_line_breaks_end_sentences(self):
        """Each line is a separate sentence even without punctuation."""
        text = "# A markdown heading line\nA paragraph line without a period"

        sentences = segment_sentences(text)

        assert sentences == ["# A markdown heading line", "A paragraph line without a period"]

    def test_abbreviations_do_not_split(self):
        """Known abbreviations keep the sentence together."""
        text = "Das Gewicht liegt bei ca. 3,6 kg und ist angenehm. Der Hals ist schlank."

        sentences = segment_sentences(text, abbreviations=["ca."])

        assert sentences[0] == "Das Gewicht liegt bei ca. 3,6 kg und ist angenehm."
        assert len(sentences) == 2

    def test_lowercase_continuation_merges(self):
        """A fragment starting lower case continues the sentence."""
        text = "Version 2.0 was released in May. it added many features to the tool."

        sentences = segment_sentences(text)

        assert len(sentences) == 1

    def test_initials_do_not_split(self):
        """Single-letter initials are not sentence ends."""
        text = "The book was written by J. Smith in the winter of that year."

        sentences = segment_sentences(text)

        assert len(sentences) == 1

    def test_empty_text(self):
        """Whitespace-only text yields no sentences."""
        assert segment_sentences("   \n\n  ") == []

    def test_deterministic(self, article_text: str):
        """Same input always yields the same segmentation."""
        assert segment_sentences(article_text) == segment_sentences(article_text)


class TestTokenizeWords:
    """Tests for word tokenization."""

    def test_lowercases_and_filters(self):
        """Tokens are lower case with short words and stop words removed."""
        tokens = tokenize_words("The Quick brown fox is on a log", stop_words={"the"})

        assert tokens == ["quick", "brown", "fox", "log"]

    def test_keeps_umlauts(self):
        """Unicode letters stay inside words."""
        tokens = tokenize_words("Größe und Übersetzung")

        assert tokens == ["größe", "und", "übersetzung"]

    def test_keeps_inner_apostrophes(self):
        """Contractions and hyphenated words are single tokens."""
        tokens = tokenize_words("don't over-engineer")

        assert tokens == ["don't", "over-engineer"]

    def test_min_chars(self):
        """Tokens at or below min_chars are dropped."""
        assert tokenize_words("tiny words here", min_chars=4) == ["words"]


class TestTextHelpers:
    """Tests for markdown and whitespace helpers."""

    def test_truncate(self):
        """Text over the limit is cut, shorter text is unchanged."""
        assert truncate("abcdef", 3) == "abc"
        assert truncate("abc", 10) == "abc"

    def test_split_paragraphs(self):
        """Blank lines separate paragraphs."""
        text = "First paragraph.\n\n  \nSecond paragraph.\n\nThird."

        assert split_paragraphs(text) == ["First paragraph.", "Second paragraph.", "Third."]

    def test_split_lines_min_chars(self):
        """Only lines longer than min_chars are returned."""
        text = "short\n\na considerably longer line"

        assert split_lines(text, min_chars=10) == ["a considerably longer line"]

    def test_heading_text(self):
        """Heading markers are removed; other lines yield None."""
        assert heading_text("## Feeding the Starter") == "Feeding the Starter"
        assert heading_text("Plain line") is None

    @pytest.mark.parametrize("line,expected", [
        ("- Solid alder body", "Solid alder body"),
        ("• Nitro finish", "Nitro finish"),
        ("* Bone nut", "Bone nut"),
        ("**Bold** text", None),
        ("Not a bullet", None),
    ])
    def test_bullet_text(self, line: str, expected):
        """Bullet markers are recognized, bold markers are not."""
        assert bullet_text(line) == expected

    def test_strip_markdown(self):
        """Links keep their label and emphasis markers are removed."""
        text = "See [our shop](https://example.com) for **great** *deals*"

        assert strip_emphasis(strip_markdown_links(text)) == "See our shop for great deals"

    def test_collapse_and_capitalize(self):
        """Spaces collapse and the first letter is capitalized."""
        assert collapse_spaces("a   b  c") == "a b c"
        assert capitalize_first("über alles") == "Über alles"
        assert capitalize_first("") == ""


class TestPatterns:
    """Tests for price and spec line patterns."""

    @pytest.mark.parametrize("text,expected", [
        ("€ 1.299,00", True),
        ("1.299,00 €", True),
        ("$49.99", True),
        ("Only $49.99 today", False),
        ("No price here", False),
    ])
    def test_is_price_only(self, text: str, expected: bool):
        """Only lines holding nothing but a price match."""
        assert is_price_only(text) is expected

    @pytest.mark.parametrize("text,expected", [
        ('25.5" Mensur', True),
        ("648' scale", True),
        ("24 Bünde aus Neusilber", False),
        ('Mensur: 25.5"', False),
    ])
    def test_is_measurement_line(self, text: str, expected: bool):
        """Lines opening with inch or foot measurements are detected."""
        assert is_measurement_line(text) is expected

    def test_is_spec_line(self):
        """Short single-colon lines with short keys are spec lines."""
        assert is_spec_line("Gewicht: 3,6 kg")
        assert not is_spec_line("Note: this has: two colons")
        assert not is_spec_line("A key that is definitely far too long for a spec: value")
        assert not is_spec_line("No colon in this line")
