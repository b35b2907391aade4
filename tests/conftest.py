"""
Shared pytest fixtures for Content Digest tests.

Provides reusable fixtures for:
- Configuration and settings
- Language packs (bundled and minimal)
- Sample documents per content type
- Temporary resources
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from content_digest.config import Settings, reset_settings
from content_digest.core import Document
from content_digest.language import LanguagePack, load_language_pack
from content_digest.processor import ContentProcessor
from content_digest.utils.logging import reset_logging


PRODUCT_TEXT = """# Vintage Custom Stratocaster 1962 Reissue

Preis: 1.299,00 €
inkl. MwSt., zzgl. Versand: 4,99 €
Sofort ab Lager verfügbar

Diese Gitarre ist eine handgefertigte Hommage an die goldene Ära des Gitarrenbaus. Der Korpus aus leichtem Erlenholz wurde in traditioneller Nitro-Lackierung veredelt und zeigt ein wunderschönes Alterungsbild. Jedes Instrument wird in unserer Werkstatt einzeln eingestellt.

Der Hals ist aus ausgesuchtem Ahorn gefertigt und bietet ein komfortables C-Profil, das sich sofort vertraut anfühlt. Das Griffbrett aus Palisander hat einen klassischen Radius und wurde sorgfältig abgerichtet. Die Bundierung wurde von Hand poliert.

Die handgewickelten Tonabnehmer liefern den glasigen, perkussiven Klang, für den diese Modelle bekannt sind. Sie bieten eine hervorragende Dynamik und reagieren fein auf den Anschlag. Zusammen mit dem Vintage-Tremolo entsteht ein lebendiger und offener Sound.

## Spezifikationen
- Korpus: Erle, zweiteilig
- Hals: Ahorn, C-Profil
- Griffbrett: Palisander, 7.25" Radius
- Tonabnehmer: Custom Shop Single Coils

Mensur: 648 mm
Gewicht: ca. 3,6 kg

## Kundenrezensionen
Ich habe die Gitarre seit drei Monaten und bin absolut begeistert von dem Klang und der Verarbeitung.
"""

ARTICLE_TEXT = """# How Sourdough Fermentation Works

Published on 12 March 2024 by Jane Baker

Sourdough bread relies on a culture of wild yeast and lactic acid bacteria. The yeast produces carbon dioxide that makes the dough rise, while the bacteria create the characteristic sour flavor.

## The Role of Temperature

Fermentation speed depends strongly on temperature. A warm kitchen accelerates the yeast, whereas a cool environment favors acid production by the bacteria. Many bakers use this to tune the flavor of their bread.

## Feeding the Starter

A starter needs regular feeding with flour and water to stay active. Skipping feedings weakens the culture and slows the rise. Consistent schedules produce the most reliable loaves.

## Conclusion

In conclusion, sourdough baking is a balance of time, temperature and care. Patience rewards the baker with complex flavor and a crisp crust.
"""

VIDEO_TEXT = """Welcome back to the channel. Today we look at guitar setups.
The most important step is adjusting the truss rod before anything else.
Guitar setups also include the action height and the intonation of every string.
A key detail is checking the nut slots, because high slots make chords go sharp.
The main takeaway is that a good guitar setup makes any guitar easier to play.
Thanks for watching and see you next time.
"""

LISTING_TEXT = """Showing 120 results for electric guitars
Sort by: Price ascending
Filter by brand
Filter by color

Fender Stratocaster Player Series in sunburst finish
Gibson Les Paul Standard with a flame maple top
Ibanez RG550 Genesis Collection in road flare red
"""


@pytest.fixture(autouse=True)
def reset_global_state():
    """
    Reset cached settings and logging before and after each test.

    This ensures tests are isolated and don't share global state.
    """
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> Settings:
    """Provide default settings."""
    return Settings()


@pytest.fixture
def language() -> LanguagePack:
    """Provide the bundled English/German language pack."""
    return load_language_pack()


@pytest.fixture
def minimal_pack() -> LanguagePack:
    """
    Provide a tiny language pack.

    Only the tables a test sets explicitly take part in the heuristics.
    """
    return LanguagePack(
        name="minimal",
        version="test",
        stop_words=["the", "and", "a"],
        product_indicators=["price", "cart"],
        article_indicators=["author", "published"],
        shipping_words=["shipping"],
        price_labels=["price:"],
        in_stock_phrases=["in stock"],
        out_of_stock_phrases=["sold out"],
        review_indicators=["review"],
        review_language=["i love"],
        navigation_denylist=["next"],
        listing_control_words=["filter", "sort"],
    )


@pytest.fixture
def processor(test_settings: Settings, language: LanguagePack) -> ContentProcessor:
    """Provide a processor with default settings."""
    return ContentProcessor(settings=test_settings, language=language)


@pytest.fixture
def product_text() -> str:
    return PRODUCT_TEXT


@pytest.fixture
def article_text() -> str:
    return ARTICLE_TEXT


@pytest.fixture
def video_text() -> str:
    return VIDEO_TEXT


@pytest.fixture
def listing_text() -> str:
    return LISTING_TEXT


@pytest.fixture
def product_document() -> Document:
    """Provide a German product page."""
    return Document(
        url="https://shop.example.com/product/strat-62",
        title="Vintage Custom Stratocaster 1962 Reissue",
        raw_text=PRODUCT_TEXT,
    )


@pytest.fixture
def article_document() -> Document:
    """Provide a blog article with author metadata."""
    return Document(
        url="https://example.com/blog/sourdough-fermentation",
        title="How Sourdough Fermentation Works",
        markdown=ARTICLE_TEXT,
        metadata={
            "metaTags": {"author": "Jane Baker", "published_time": "2024-03-12"},
            "openGraph": {"type": "article"},
        },
    )


@pytest.fixture
def video_document() -> Document:
    """Provide a video transcript."""
    return Document(
        url="https://www.youtube.com/watch?v=abc123",
        title="Guitar Setup Basics",
        raw_text=VIDEO_TEXT,
    )


@pytest.fixture
def listing_document() -> Document:
    """Provide a search results page."""
    return Document(
        url="https://example.com/search?q=electric+guitars",
        title="Electric Guitars",
        raw_text=LISTING_TEXT,
    )
