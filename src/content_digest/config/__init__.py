"""
Configuration module for Content Digest.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from content_digest.config.settings import (
    Settings,
    TextSettings,
    ScoringSettings,
    PriceSettings,
    SummarySettings,
    ExtractionSettings,
    LoggingSettings,
)
from content_digest.config.loader import load_config, get_settings, reset_settings

__all__ = [
    "Settings",
    "TextSettings",
    "ScoringSettings",
    "PriceSettings",
    "SummarySettings",
    "ExtractionSettings",
    "LoggingSettings",
    "load_config",
    "get_settings",
    "reset_settings",
]
