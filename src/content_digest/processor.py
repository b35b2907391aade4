"""
Content processing engine.

ContentProcessor turns one scraped Document into one ProcessingResult:

    Document -> text -> classify -> structured data
                     -> segment -> score -> summaries
                                         -> key points
                     -> reviews

The engine holds no state between documents. Identical input always
yields an identical result.
"""

from dataclasses import replace

from content_digest.analysis import (
    ContentTypeClassifier,
    KeyPointExtractor,
    PriceResolver,
    ReviewExtractor,
    StructuredDataExtractor,
)
from content_digest.config import Settings, get_settings
from content_digest.core.exceptions import (
    EmptyContentError,
    SummarizationError,
)
from content_digest.core.models import (
    ContentType,
    Document,
    ProcessingResult,
    ScoredSentence,
    Summaries,
)
from content_digest.language import LanguagePack, load_language_pack
from content_digest.summarization import (
    HeuristicSummaryStrategy,
    NarrativeSummaryBuilder,
    SummaryStrategy,
)
from content_digest.text import SentenceScorer, segment_sentences, truncate
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


class ContentProcessor:
    """
    Heuristic content analysis and summarization engine.

    Wires the classifier, extractors, scorer and summary strategy
    together. Components only read their configuration, so one processor
    can be reused for any number of documents.

    Example:
        >>> processor = ContentProcessor()
        >>> result = processor.process(Document(
        ...     url="https://shop.example.com/product/guitar-1",
        ...     raw_text=page_text,
        ... ))
        >>> result.content_type
        <ContentType.PRODUCT: 'product'>
        >>> result.extracted_data.structured_data["price"]
        '1.299,00 €'
    """

    def __init__(
        self,
        settings: Settings | None = None,
        language: LanguagePack | None = None,
        strategy: SummaryStrategy | None = None,
    ) -> None:
        """
        Initialize the processor.

        Args:
            settings: Engine settings. Defaults are used when None.
            language: Keyword tables. Loaded from settings.language_pack
                when None.
            strategy: Summary strategy. Defaults to the heuristic strategy.
        """
        self.settings = settings or Settings()
        self.language = language or load_language_pack(self.settings.language_pack)

        s = self.settings
        lang = self.language

        self.classifier = ContentTypeClassifier(lang)
        self.price_resolver = PriceResolver(lang, s.price)
        self.structured_extractor = StructuredDataExtractor(
            lang, s.extraction, self.price_resolver)
        self.scorer = SentenceScorer(lang, s.scoring, s.text)
        self.key_point_extractor = KeyPointExtractor(
            lang, s.extraction, self.price_resolver)
        self.review_extractor = ReviewExtractor(lang, s.extraction)
        self.strategy = strategy or HeuristicSummaryStrategy(
            NarrativeSummaryBuilder(lang, s.summary, s.text))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ContentProcessor":
        """Create a processor from the process-wide settings."""
        return cls(settings=settings or get_settings())

    def process(self, document: Document) -> ProcessingResult:
        """
        Process one document.

        Args:
            document: Scraped page

        Returns:
            Complete ProcessingResult

        Raises:
            EmptyContentError: If the document text is empty or whitespace
            SummarizationError: If an injected summary strategy fails
        """
        text = document.text
        if not text.strip():
            logger.warning(f"Empty content for {document.url or '<no url>'}")
            raise EmptyContentError(url=document.url or None)

        text = truncate(text, self.settings.text.max_input_chars)

        content_type = self.classifier.classify(
            document.url, document.title, text, document.metadata)
        extracted = self.structured_extractor.extract(content_type, text, document.metadata)

        sentences = segment_sentences(
            text,
            min_chars=self.settings.text.min_sentence_chars,
            abbreviations=self.language.abbreviations,
        )
        scored = self.scorer.score(sentences, content_type)
        logger.debug(f"{len(sentences)} sentences scored")

        summaries = self._summarize(scored, content_type, text, extracted.key_points)

        key_points = self.key_point_extractor.extract_comprehensive_key_points(
            content_type, text, scored)
        if key_points:
            extracted = replace(extracted, key_points=key_points)

        reviews = self.review_extractor.extract_reviews(text)

        logger.info(
            f"Processed {document.url or '<no url>'}: {content_type.value}, "
            f"{len(sentences)} sentences, {len(key_points)} key points, "
            f"{len(reviews)} reviews"
        )

        return ProcessingResult(
            summaries=summaries,
            content_type=content_type,
            extracted_data=extracted,
            key_points=key_points or None,
            reviews=reviews or None,
        )

    def _summarize(
        self,
        scored: list[ScoredSentence],
        content_type: ContentType,
        text: str,
        key_points: list[str] | None,
    ) -> Summaries:
        name = getattr(self.strategy, "name", type(self.strategy).__name__)
        try:
            return self.strategy.summarize(scored, content_type, text, key_points)
        except SummarizationError:
            raise
        except Exception as e:
            logger.error(f"Summary strategy {name} failed: {e}")
            raise SummarizationError(
                f"Summary strategy failed: {e}", strategy=name) from e
