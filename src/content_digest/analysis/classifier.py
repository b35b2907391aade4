"""
Content type detection.

Assigns exactly one ContentType per document from, in order of
precedence, structured metadata (JSON-LD, Open Graph), URL patterns and
keyword counts in the text.
"""

from content_digest.core.metadata import MetaValue
from content_digest.core.models import ContentType
from content_digest.language import LanguagePack, count_present
from content_digest.utils.logging import get_logger

logger = get_logger(__name__)


class ContentTypeClassifier:
    """
    Rule-based content type classifier.

    The first matching rule wins. Classification is a pure function of
    its inputs.

    Example:
        >>> classifier = ContentTypeClassifier(load_language_pack())
        >>> classifier.classify("https://youtu.be/abc", "", "", None)
        <ContentType.VIDEO: 'video'>
    """

    # JSON-LD @type fragments, checked in this order
    JSON_LD_TYPES = (
        ("Product", ContentType.PRODUCT),
        ("Article", ContentType.ARTICLE),
        ("BlogPosting", ContentType.ARTICLE),
        ("NewsArticle", ContentType.ARTICLE),
        ("VideoObject", ContentType.VIDEO),
    )

    OPEN_GRAPH_TYPES = {
        "product": ContentType.PRODUCT,
        "article": ContentType.ARTICLE,
        "video": ContentType.VIDEO,
    }

    VIDEO_HOSTS = ("youtube.com", "youtu.be", "vimeo.com")
    PRODUCT_URL_MARKERS = ("/product/", "/p/", "/item/", "shop", "store", "buy")
    ARTICLE_URL_MARKERS = ("/article/", "/post/", "/blog/", "/news/")
    LISTING_URL_MARKERS = ("/search", "/listing", "/results")

    MIN_INDICATORS = 2

    def __init__(self, language: LanguagePack) -> None:
        self.language = language

    def classify(
        self,
        url: str,
        title: str,
        text: str,
        metadata: MetaValue | dict | None = None,
    ) -> ContentType:
        """
        Classify a document.

        Args:
            url: Source URL
            title: Page title (currently unused by the rules)
            text: Page text
            metadata: Scraper metadata in any JSON-like shape

        Returns:
            The detected ContentType
        """
        meta = MetaValue.from_json(metadata)

        content_type = self._from_metadata(meta)
        if content_type is not None:
            logger.debug(f"Classified {url or '<no url>'} as {content_type.value} from metadata")
            return content_type

        content_type = self._from_url(url.lower(), text.lower())
        if content_type is not None:
            logger.debug(f"Classified {url or '<no url>'} as {content_type.value} from URL")
            return content_type

        content_type = self._from_text(text.lower())
        logger.debug(f"Classified {url or '<no url>'} as {content_type.value} from text")
        return content_type

    def _from_metadata(self, meta: MetaValue) -> ContentType | None:
        for item in self._json_ld_items(meta.get("jsonLd")):
            for type_name in item.get("@type").iter_strings():
                for fragment, content_type in self.JSON_LD_TYPES:
                    if fragment in type_name:
                        return content_type

        og_type = meta.get("openGraph").get("type").as_str()
        if og_type:
            return self.OPEN_GRAPH_TYPES.get(og_type.strip().lower())

        return None

    @staticmethod
    def _json_ld_items(json_ld: MetaValue):
        """Top-level JSON-LD objects plus the members of any @graph."""
        for item in json_ld.iter_maps():
            yield item
            yield from item.get("@graph").iter_maps()

    def _from_url(self, url: str, text: str) -> ContentType | None:
        if any(host in url for host in self.VIDEO_HOSTS):
            return ContentType.VIDEO
        if any(marker in url for marker in self.PRODUCT_URL_MARKERS):
            return ContentType.PRODUCT
        if any(marker in url for marker in self.ARTICLE_URL_MARKERS):
            return ContentType.ARTICLE
        if any(marker in url for marker in self.LISTING_URL_MARKERS):
            return ContentType.LISTING
        controls = self.language.listing_control_words
        if controls and all(word in text for word in controls):
            return ContentType.LISTING
        return None

    def _from_text(self, text: str) -> ContentType:
        if count_present(text, self.language.product_indicators) >= self.MIN_INDICATORS:
            return ContentType.PRODUCT
        if count_present(text, self.language.article_indicators) >= self.MIN_INDICATORS:
            return ContentType.ARTICLE
        return ContentType.GENERAL
