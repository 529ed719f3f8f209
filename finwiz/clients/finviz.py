"""Finviz quote page client - fetch the page and scrape its four tables."""
import logging
from typing import List, Optional

import requests

from ..config import QUOTE_URL, REQUEST_TIMEOUT, USER_AGENT
from ..errors import FetchError, QueryError
from ..models import (
    InsiderTable,
    InsiderTransaction,
    NewsDay,
    RatingEvent,
    RawPair,
    SnapshotRecord,
)
from ..normalizers import process_insider, process_news, process_ratings, process_snapshot
from .query import query_columns

logger = logging.getLogger(__name__)

SNAPSHOT_TABLE = "table.snapshot-table2"
RATINGS_TABLE = "table.fullview-ratings-outer"
NEWS_TABLE = "table.fullview-news-outer"
INSIDER_TABLE = "table.body-table"

INSIDER_COLUMNS = {
    "entity": "tr td:nth-child(1)",
    "relationship": "tr td:nth-child(2)",
    "date": "tr td:nth-child(3)",
    "transaction": "tr td:nth-child(4)",
    "cost": "tr td:nth-child(5)",
    "shares": "tr td:nth-child(6)",
    "value": "tr td:nth-child(7)",
    "total": "tr td:nth-child(8)",
    "sec": "tr td:nth-child(9)",
    "link": "tr td:nth-child(9) a@href",
}


def get_stock_page(ticker: str, session: Optional[requests.Session] = None) -> str:
    """Return the HTML of the quote page for ticker. Raises FetchError unless the page answers 200."""
    http = session or requests
    try:
        r = http.get(
            QUOTE_URL,
            params={"t": ticker},
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        logger.warning("fetch failed for %s: %s", ticker, e)
        raise FetchError(ticker, reason=str(e)) from e
    if r.status_code != 200:
        logger.warning("quote page for %s returned HTTP %s", ticker, r.status_code)
        raise FetchError(ticker, status=r.status_code)
    return r.text


def get_snapshot_info(page: str) -> List[RawPair]:
    """Snapshot cells as [(label, value), ...]; cells alternate label, value."""
    cells = query_columns(page, SNAPSHOT_TABLE, {"rows": "td"})["rows"]
    return [(cells[i], cells[i + 1]) for i in range(0, len(cells) - 1, 2)]


def get_ratings(page: str) -> List[List[str]]:
    """Analyst rating rows of five cells: date, action, org, rating, price target."""
    items = query_columns(page, RATINGS_TABLE, {"items": "td.fullview-ratings-inner td"})["items"]
    return [items[i:i + 5] for i in range(0, len(items) - 4, 5)]


def get_news(page: str) -> List[List[str]]:
    """News rows of (time, headline, link)."""
    d = query_columns(page, NEWS_TABLE, {
        "times": 'td[align="right"]',
        "headlines": 'td[align="left"]',
        "links": 'td[align="left"] a@href',
    })
    return [list(row) for row in zip(d["times"], d["headlines"], d["links"])]


def get_insider(page: str) -> InsiderTable:
    """Insider trading columns. Every column but link starts with its header cell."""
    d = query_columns(page, INSIDER_TABLE, INSIDER_COLUMNS)
    data = {key: (values if key == "link" else values[1:]) for key, values in d.items()}
    return InsiderTable(**data)


class Stock:
    """
    Scraped quote page for one ticker.

    Each accessor re-queries the stored page, so a missing table only fails
    the accessor that needs it.
    """

    def __init__(self, ticker: str, page: str):
        self.ticker = ticker
        self.page = page

    def financials(self) -> SnapshotRecord:
        return process_snapshot(get_snapshot_info(self.page))

    def ratings(self) -> List[RatingEvent]:
        return process_ratings(get_ratings(self.page))

    def news(self) -> List[NewsDay]:
        return process_news(get_news(self.page))

    def insider(self, year: Optional[int] = None) -> List[InsiderTransaction]:
        """Insider trades; the page omits the year, which defaults to the current one."""
        table = get_insider(self.page)
        if len(table.link) < len(table):
            raise QueryError(INSIDER_TABLE, f"Insider table for {self.ticker} is missing SEC filing links.")
        return process_insider(table, year=year)

    def __repr__(self) -> str:
        return f"Stock({self.ticker!r})"


def stock(ticker: str, session: Optional[requests.Session] = None) -> Stock:
    """Fetch the quote page once and return the accessor object for it."""
    ticker = ticker.strip().upper()
    return Stock(ticker, get_stock_page(ticker, session=session))
