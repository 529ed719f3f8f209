"""Errors raised while fetching and scraping a quote page."""
from typing import Optional


class FinwizError(Exception):
    """Base class for every scraper error."""
    pass


class FetchError(FinwizError):
    """Raised when the quote page for a ticker cannot be retrieved."""

    def __init__(self, ticker: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.ticker = ticker
        self.status = status
        msg = f"Ticker {ticker} not found."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class QueryError(FinwizError):
    """Raised when a table (or the rows a category needs) is missing from the page."""

    def __init__(self, target: str, message: Optional[str] = None):
        self.target = target
        super().__init__(message or f"No element matching {target!r} on the page.")


class ConversionError(FinwizError, ValueError):
    """Raised when a magnitude carries a multiplier letter other than K, M or B."""

    def __init__(self, text: str):
        self.text = text
        mult = text[-1:] or "<empty>"
        super().__init__(f"Multiplier {mult} not recognized in {text!r}")
