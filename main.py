#!/usr/bin/env python3
"""
Finviz quote scraper.

Fetches a ticker's Finviz quote page and prints its snapshot financials,
analyst ratings, news and insider trades as JSON.
"""
import argparse
import json
import logging
import sys
import os

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from pathlib import Path
from dotenv import load_dotenv
load_dotenv(Path(_here) / ".env")

from finwiz.config import LOG_LEVEL
from finwiz.clients import stock
from finwiz.errors import FetchError, QueryError
from finwiz.export import (
    financials_frame,
    insider_frame,
    jsonable,
    news_frame,
    ratings_frame,
    write_csv,
)

CATEGORIES = ["financials", "ratings", "news", "insider"]

_FRAMES = {
    "financials": financials_frame,
    "ratings": ratings_frame,
    "news": news_frame,
    "insider": insider_frame,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Scrape financials, ratings, news and insider trades from a Finviz quote page."
    )
    parser.add_argument("ticker", help="Stock ticker, e.g. AAPL")
    parser.add_argument(
        "--only",
        choices=CATEGORIES,
        action="append",
        default=None,
        help="Category to print (repeatable; default: all four)",
    )
    parser.add_argument(
        "--csv-dir",
        type=str,
        default=None,
        help="Also write one CSV per category into this directory",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s | %(name)s | %(message)s")

    try:
        s = stock(args.ticker)
    except FetchError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"Fetched quote page for {s.ticker}.", file=sys.stderr)

    failed = False
    frames = {}
    for category in args.only or CATEGORIES:
        try:
            result = getattr(s, category)()
        except QueryError as e:
            # other categories are still usable
            print(f"{category}: {e}", file=sys.stderr)
            failed = True
            continue
        print(json.dumps({category: jsonable(result)}, indent=2, allow_nan=False))
        frames[category] = _FRAMES[category](result)

    if args.csv_dir and frames:
        for path in write_csv(s.ticker, frames, args.csv_dir):
            print(f"Wrote {path}.", file=sys.stderr)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
