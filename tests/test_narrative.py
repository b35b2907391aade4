"""
Tests for narrative summary construction.

Tests flowing text, summary length targets, the product narrative and
the key highlights block.
"""

import pytest

from content_digest.config import SummarySettings
from content_digest.core import ContentType, ScoredSentence
from content_digest.language import LanguagePack
from content_digest.summarization import NarrativeSummaryBuilder


def scored(*texts: str) -> list[ScoredSentence]:
    return [
        ScoredSentence(text, float(len(texts) - index), index)
        for index, text in enumerate(texts)
    ]


class TestFlowingText:
    """Tests for sentence joining and cleanup."""

    @pytest.fixture
    def builder(self, language: LanguagePack) -> NarrativeSummaryBuilder:
        return NarrativeSummaryBuilder(language)

    def test_create_flowing_text(self, builder: NarrativeSummaryBuilder):
        """Connective starters are dropped after the first sentence."""
        text = builder.create_flowing_text(
            ["the first sentence", "This is second", "Furthermore, third one!"])

        assert text == "The first sentence. Is second. Third one!"

    def test_first_sentence_keeps_starter(self, builder: NarrativeSummaryBuilder):
        """The opening sentence keeps its starter word."""
        text = builder.create_flowing_text(["This guitar is light.", "It sounds warm."])

        assert text == "This guitar is light. Sounds warm."

    def test_flowing_summary_stops_at_target(self, builder: NarrativeSummaryBuilder):
        """Selection stops before the word target is exceeded."""
        sentences = scored("one two three.", "four five six.", "seven eight nine.")

        assert builder.build_flowing_summary(sentences, 7, 10) == "One two three. Four five six."

    def test_flowing_summary_sentence_cap(self, builder: NarrativeSummaryBuilder):
        """No more than max_sentences are used."""
        sentences = scored("one two three.", "four five six.", "seven eight nine.")

        assert builder.build_flowing_summary(sentences, 100, 1) == "One two three."

    def test_oversized_top_sentence_truncated(self, builder: NarrativeSummaryBuilder):
        """A top sentence over the target is cut and marked."""
        sentences = scored("alpha beta gamma delta epsilon zeta")

        assert builder.build_flowing_summary(sentences, 4, 5) == "alpha beta gamma delta..."

    def test_create_flowing_paragraph(self, builder: NarrativeSummaryBuilder):
        """Paragraph sentences are cleaned and joined."""
        paragraph = builder.create_flowing_paragraph([
            '- "Der Klang ist warm und offen"',
            "Die Bespielbarkeit ist hervorragend",
            "kurz",
        ])

        assert paragraph == "Der Klang ist warm und offen. Bespielbarkeit ist hervorragend."

    def test_paragraph_normalizes_quotes_and_spacing(self, builder: NarrativeSummaryBuilder):
        """Quotes and space before punctuation are normalized."""
        paragraph = builder.create_flowing_paragraph([
            "Er nennt sie „Traumgitarre“ und spielt sie jeden Abend , gerne laut",
        ])

        assert paragraph == 'Er nennt sie "Traumgitarre" und spielt sie jeden Abend, gerne laut.'

    def test_narrative_paragraph_breaks(self, builder: NarrativeSummaryBuilder):
        """Paragraphs break near the word target once they hold enough sentences."""
        sentence = " ".join(["word"] * 19) + " end."
        text = builder.create_narrative_paragraphs([sentence] * 10)

        paragraphs = text.split("\n\n")
        assert len(paragraphs) == 2
        assert paragraphs[0].count("end.") == 7


class TestBuildSummaries:
    """Tests for build_summaries."""

    @pytest.fixture
    def builder(self, language: LanguagePack) -> NarrativeSummaryBuilder:
        return NarrativeSummaryBuilder(language)

    def test_no_sentences_uses_text_prefix(self, builder: NarrativeSummaryBuilder):
        """Without sentences the text prefixes are used."""
        text = "x" * 500

        summaries = builder.build_summaries([], ContentType.GENERAL, text)

        assert summaries.short == "x" * 150
        assert summaries.detailed == "x" * 400

    def test_short_summary_word_target(self, builder: NarrativeSummaryBuilder):
        """The short summary stays within its word target."""
        sentences = scored(*[" ".join(["word"] * 40) + "." for _ in range(10)])

        summaries = builder.build_summaries(sentences, ContentType.ARTICLE, "")

        assert len(summaries.short.split()) <= 150
        assert len(summaries.short.split()) == 120

    def test_highlights_block(self, builder: NarrativeSummaryBuilder):
        """Key points are appended as a highlights block."""
        sentences = scored("Sourdough needs time and patience.")

        summaries = builder.build_summaries(
            sentences, ContentType.ARTICLE, "", key_points=["Feed the starter", "Keep it warm"])

        assert summaries.detailed == (
            "Sourdough needs time and patience.\n\n\n"
            "Key Highlights:\n• Feed the starter\n• Keep it warm"
        )

    def test_no_highlights_without_key_points(self, builder: NarrativeSummaryBuilder):
        """No block is added without key points."""
        sentences = scored("Sourdough needs time and patience.")

        summaries = builder.build_summaries(sentences, ContentType.GENERAL, "", key_points=[])

        assert summaries.detailed == "Sourdough needs time and patience."

    def test_custom_heading(self, language: LanguagePack):
        """The highlights heading is configurable."""
        builder = NarrativeSummaryBuilder(
            language, SummarySettings(highlights_heading="Highlights:"))

        summaries = builder.build_summaries(
            scored("Sourdough needs time and patience."), ContentType.VIDEO, "",
            key_points=["Feed the starter"])

        assert summaries.detailed.endswith("\n\n\nHighlights:\n• Feed the starter")


class TestProductNarrative:
    """Tests for the descriptive product narrative."""

    @pytest.fixture
    def builder(self, language: LanguagePack) -> NarrativeSummaryBuilder:
        return NarrativeSummaryBuilder(language)

    def test_product_fixture(self, builder: NarrativeSummaryBuilder, product_text: str):
        """Only descriptive copy makes it into the narrative."""
        narrative = builder.build_narrative_product_description(product_text)

        assert "Erlenholz" in narrative
        assert "Tonabnehmer liefern" in narrative
        assert "€" not in narrative
        assert "Mensur" not in narrative
        assert "begeistert" not in narrative
        assert "Spezifikationen" not in narrative

    def test_placeholder(self, builder: NarrativeSummaryBuilder):
        """Pages without descriptive copy get the placeholder."""
        narrative = builder.build_narrative_product_description("Preis: 99 €\nIn den Warenkorb")

        assert narrative == "Detailed product description is still being processed."

    def test_single_paragraph_fallback(self, builder: NarrativeSummaryBuilder):
        """One descriptive paragraph still yields a narrative."""
        text = (
            "Diese Gitarre ist leicht und bietet einen warmen, offenen Klang. "
            "Der Hals ist schlank und spielt sich auch nach Stunden noch bequem."
        )

        narrative = builder.build_narrative_product_description(text)

        assert narrative.startswith("Diese Gitarre ist leicht")
        assert "Hals ist schlank" in narrative

    def test_measurement_lines_left_out(self, builder: NarrativeSummaryBuilder):
        """Sentences opening with a measurement are not narrative."""
        text = (
            "Diese Gitarre ist leicht und bietet einen warmen, offenen Klang. "
            '25.5" Mensur ist klassisch und sorgt für eine straffe Saitenspannung. '
            "Der Hals ist schlank und spielt sich auch nach Stunden noch bequem."
        )

        narrative = builder.build_narrative_product_description(text)

        assert narrative.startswith("Diese Gitarre ist leicht")
        assert "Hals ist schlank" in narrative
        assert "Mensur" not in narrative

    def test_product_summaries_use_narrative(
        self, builder: NarrativeSummaryBuilder, product_text: str
    ):
        """Product detailed summaries are the narrative without highlights."""
        sentences = scored("Preis: 1.299,00 €", "Diese Gitarre ist eine handgefertigte Hommage.")

        summaries = builder.build_summaries(
            sentences, ContentType.PRODUCT, product_text, key_points=["Price: 1.299,00 €"])

        assert "Key Highlights" not in summaries.detailed
        assert "Erlenholz" in summaries.detailed


class TestDescriptiveParagraph:
    """Tests for is_descriptive_paragraph."""

    @pytest.fixture
    def builder(self, language: LanguagePack) -> NarrativeSummaryBuilder:
        return NarrativeSummaryBuilder(language)

    def test_descriptive(self, builder: NarrativeSummaryBuilder):
        """Prose with narrative verbs is descriptive."""
        paragraph = (
            "Diese Gitarre bietet weitere Vorteile für anspruchsvolle Spieler. "
            "Sie ist leicht und klingt hervorragend im Bandkontext."
        )

        assert builder.is_descriptive_paragraph(paragraph)

    def test_ui_word_rejects(self, builder: NarrativeSummaryBuilder):
        """UI labels disqualify a paragraph."""
        paragraph = (
            "Weiter zur Kasse. Diese Gitarre ist leicht und klingt hervorragend "
            "im Bandkontext, wirklich jeden Abend."
        )

        assert not builder.is_descriptive_paragraph(paragraph)

    def test_too_short(self, builder: NarrativeSummaryBuilder):
        """Short paragraphs are not descriptive."""
        assert not builder.is_descriptive_paragraph("Die Gitarre ist leicht. Sie klingt gut.")

    def test_spec_table(self, builder: NarrativeSummaryBuilder):
        """Spec tables are not descriptive."""
        paragraph = (
            "Korpus: Erle\nHals: Ahorn\nGriffbrett: Palisander\nMensur: 648 mm\n"
            "Sattel: Knochen\nMechaniken: Vintage-Style, Kluson\n"
            "Tonabnehmer: Single Coils\nGewicht ist 3,6 kg."
        )

        assert not builder.is_descriptive_paragraph(paragraph)

    def test_short_priced_paragraph(self, builder: NarrativeSummaryBuilder):
        """Short paragraphs with a price are not descriptive."""
        paragraph = (
            "Diese Gitarre ist heute besonders günstig und kostet im Rahmen "
            "unserer Aktion nur 899 €. Sie ist sofort spielbereit und gut eingestellt."
        )

        assert not builder.is_descriptive_paragraph(paragraph)

    def test_needs_narrative_word(self, builder: NarrativeSummaryBuilder):
        """Paragraphs without narrative verbs are not descriptive."""
        paragraph = (
            "Leichter Korpus aus Erle. Schlanker Hals aus Ahorn. Griffbrett aus "
            "Palisander mit klassischem Radius. Bundstäbchen aus Neusilber."
        )

        assert not builder.is_descriptive_paragraph(paragraph)
