"""Text -> number conversions for values scraped from the quote page."""
import re
from datetime import date, datetime
from typing import List, Optional

import numpy as np

from .errors import ConversionError

# Date/time layouts used by the page
RATING_DATE_FMT = "%b-%d-%y"         # Jan-02-20
NEWS_TIME_FMT = "%I:%M%p"            # 09:30AM
INSIDER_DATE_FMT = "%b %d"           # Jan 02
SEC_FILING_FMT = "%b %d %I:%M %p"    # Jan 02 06:30 PM

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_MULTIPLIERS = {
    "k": 1e3,
    "m": 1e6,
    "b": 1e9,
}


def to_number(num_str: str) -> float:
    """Parse the leading number of a string, ignoring thousands separators. NaN if none."""
    num = num_str.replace(",", "").strip()
    match = _LEADING_NUMBER.match(num)
    if not match:
        return np.nan
    return float(match.group(0))


def perc_to_number(num_str: str) -> float:
    """'12.3%' -> 12.3 (kept in the 0-100 range)."""
    return to_number(num_str[:-1])


def mult_to_number(num_str: str) -> float:
    """'1.1B' -> 1.1e9. Raises ConversionError for an unknown multiplier letter."""
    num = to_number(num_str[:-1])
    mult = _MULTIPLIERS.get(num_str[-1:].lower())
    if mult is None:
        raise ConversionError(num_str)
    return num * mult


def cur_to_number(num_str: str) -> float:
    """'$42.10' -> 42.1"""
    return to_number(num_str[1:])


# special case: 52 week range, "low - high"
def range_52w(text: str) -> List[float]:
    return [to_number(point.strip()) for point in text.split("-")]


# special case: volatility, "week% month%"
def volatility(text: str) -> List[float]:
    return [perc_to_number(v.strip()) for v in text.split()]


def is_nan(value) -> bool:
    return isinstance(value, float) and bool(np.isnan(value))


def slugify(text: str) -> str:
    # "Dividend" and "Dividend %" are separate fields
    text = text.lower().strip().replace("%", " percent ")
    text = re.sub(r"[^a-z0-9]+", "_", text)
    return text.strip("_")


def parse_date(text: str, fmt: str, year: Optional[int] = None) -> str:
    """
    Parse a page date into YYYY-MM-DD.
    Layouts without a year (insider table) get `year`, or the current year.
    """
    text = text.strip()
    if "%y" not in fmt and "%Y" not in fmt:
        year = year or date.today().year
        return datetime.strptime(f"{text} {year}", f"{fmt} %Y").date().isoformat()
    return datetime.strptime(text, fmt).date().isoformat()


def parse_time(text: str, fmt: str = NEWS_TIME_FMT) -> str:
    """'09:30PM' -> '21:30'"""
    return datetime.strptime(text.strip(), fmt).strftime("%H:%M")
