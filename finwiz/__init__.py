"""Scrape snapshot financials, analyst ratings, news and insider trades from Finviz quote pages."""
from .clients import Stock, stock
from .errors import ConversionError, FetchError, FinwizError, QueryError
from .models import InsiderTransaction, NewsDay, NewsItem, RatingEvent

__all__ = [
    "stock",
    "Stock",
    "FinwizError",
    "FetchError",
    "QueryError",
    "ConversionError",
    "RatingEvent",
    "NewsDay",
    "NewsItem",
    "InsiderTransaction",
]
