"""
Analysis module for Content Digest.

Provides the heuristic extraction stages including:
- Content type classification
- Main price resolution
- Per content type structured data extraction
- Review extraction
- Comprehensive key point extraction
"""

from content_digest.analysis.classifier import ContentTypeClassifier
from content_digest.analysis.price import PriceResolver, PriceCandidate, parse_amount
from content_digest.analysis.structured import (
    StructuredDataExtractor,
    availability_status,
    extract_headings,
    top_words,
)
from content_digest.analysis.reviews import ReviewExtractor
from content_digest.analysis.key_points import KeyPointExtractor

__all__ = [
    # Classification
    "ContentTypeClassifier",
    # Price
    "PriceResolver",
    "PriceCandidate",
    "parse_amount",
    # Structured data
    "StructuredDataExtractor",
    "availability_status",
    "extract_headings",
    "top_words",
    # Reviews and key points
    "ReviewExtractor",
    "KeyPointExtractor",
]
