"""
Custom exceptions for the Content Digest engine.

Provides a small hierarchy of exceptions for the processing pipeline.
All exceptions inherit from ContentDigestError.

Exception Hierarchy:
    ContentDigestError (base)
    ├── ConfigurationError
    └── ProcessingError
        ├── EmptyContentError
        └── SummarizationError

The engine itself only ever raises EmptyContentError. Everything else
inside the pipeline degrades to empty collections or placeholder text.
"""

from typing import Any


class ContentDigestError(Exception):
    """
    Base exception for all Content Digest errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ContentDigestError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - A language pack cannot be found or parsed
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Processing Errors
# =============================================================================


class ProcessingError(ContentDigestError):
    """
    Base error for document processing.

    The host marks the source item as failed when one of these propagates.
    The engine never retries.
    """

    pass


class EmptyContentError(ProcessingError):
    """
    Input text is empty or whitespace-only.

    Raised before any extraction begins, after the markdown to plain
    text fallback has been applied.
    """

    def __init__(
        self,
        message: str = "Content is empty and cannot be summarized",
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.url = url


class SummarizationError(ProcessingError):
    """
    Error raised by a pluggable summary strategy.

    The built-in heuristic strategy never raises this. Custom strategies
    injected into the processor may.
    """

    def __init__(
        self,
        message: str,
        strategy: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if strategy:
            details["strategy"] = strategy
        super().__init__(message, details)
        self.strategy = strategy
