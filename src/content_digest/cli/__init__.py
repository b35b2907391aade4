"""
CLI module for Content Digest.

Provides command-line interface using Typer:
- process: Summarize a scraped document
- classify: Detect a document's content type
- config: Configuration management
"""

from content_digest.cli.main import app

__all__ = ["app"]
