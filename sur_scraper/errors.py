# sur_scraper/errors.py
from __future__ import annotations
from typing import Optional


class ScraperError(RuntimeError):
    """Domain specific error raised for scraping issues."""


class FetchError(ScraperError):
    """The source page could not be retrieved (transport failure or non-2xx status)."""

    def __init__(self, message: str, status: Optional[int] = None, status_text: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text


class ParseError(ScraperError):
    """Markup could not be turned into a document."""
