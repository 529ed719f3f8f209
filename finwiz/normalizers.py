"""Turn raw table text scraped from the quote page into typed records."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .convert import (
    INSIDER_DATE_FMT,
    RATING_DATE_FMT,
    SEC_FILING_FMT,
    cur_to_number,
    is_nan,
    mult_to_number,
    parse_date,
    parse_time,
    perc_to_number,
    range_52w,
    slugify,
    to_number,
    volatility,
)
from .errors import QueryError
from .models import (
    InsiderTable,
    InsiderTransaction,
    NewsDay,
    NewsItem,
    RatingChange,
    RatingEvent,
    RawPair,
    SnapshotRecord,
    TargetChange,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SnapshotState:
    processed: dict = field(default_factory=dict)
    seen_eps_next_y: bool = False


def _first_two(values: List[float]):
    # extra segments are ignored, missing ones read as NaN
    return (list(values) + [np.nan, np.nan])[:2]


def _generic_value(v: str):
    if v.endswith("%"):
        value = perc_to_number(v)
    elif v[-1:] in ("M", "B", "K"):
        # letter multiplier, e.g. 1.1B
        value = mult_to_number(v)
    else:
        value = to_number(v)
    if is_nan(value):
        # leave as text when the field is not numeric (e.g. "Yes", "Oct 30 AMC")
        return v.lower()
    return value


def _snapshot_step(state: _SnapshotState, pair: RawPair) -> _SnapshotState:
    label, v = pair
    key = slugify(label)
    updates = {}
    seen_eps = state.seen_eps_next_y
    if key == "52w_range":
        low, high = _first_two(range_52w(v))
        updates = {"52w_low_price": low, "52w_high_price": high}
    elif key == "volatility":
        week, month = _first_two(volatility(v))
        updates = {"volatility_week": week, "volatility_month": month}
    elif key == "eps_next_y":
        # The label appears twice on the page; only the first one (the
        # dollar estimate) is kept.
        if not seen_eps:
            updates = {"eps_next_y_estimate": to_number(v)}
            seen_eps = True
    else:
        updates = {key: _generic_value(v)}
    return _SnapshotState(processed={**state.processed, **updates}, seen_eps_next_y=seen_eps)


def process_snapshot(pairs: Iterable[RawPair]) -> SnapshotRecord:
    """
    Convert snapshot (label, value) pairs into a slug -> value mapping.

    52W Range and Volatility expand into two keys each. Values ending in %
    or an upper-case K/M/B become numbers; anything that is not numeric is
    kept as lower-cased text. Later labels overwrite earlier ones with the
    same slug, except EPS next Y which keeps its first occurrence only.
    """
    state = _SnapshotState()
    count = 0
    for pair in pairs:
        state = _snapshot_step(state, pair)
        count += 1
    logger.debug("processed %d snapshot pairs into %d fields", count, len(state.processed))
    return dict(state.processed)


def _before_after(tokens: List[str]):
    # "before -> after", just "after", or a blank cell
    if not tokens:
        return None, ""
    before = tokens[0] if len(tokens) > 1 else None
    return before, tokens[-1]


def process_ratings(ratings: Iterable[Sequence[str]]) -> List[RatingEvent]:
    """Convert rows of (date, action, org, rating, price target) into RatingEvents."""
    processed: List[RatingEvent] = []
    for date_text, action, org, status, price in ratings:
        before_r, after_r = _before_after(status.split())
        before_p, after_p = _before_after(price.split())
        processed.append(
            RatingEvent(
                date=parse_date(date_text, RATING_DATE_FMT),
                action=action.lower(),
                org=org,
                rating=RatingChange(
                    before=before_r.lower() if before_r is not None else "",
                    after=after_r.lower(),
                ),
                target=TargetChange(
                    before=cur_to_number(before_p) if before_p is not None else "",
                    after=cur_to_number(after_p),
                ),
            )
        )
    logger.debug("processed %d ratings", len(processed))
    return processed


def process_news(news: Iterable[Sequence[str]]) -> List[NewsDay]:
    """
    Group news rows into days.

    The page prints the date only on the first headline of each day
    ("Jan-02-20 09:30AM"); the following rows carry only the time and belong
    to the same day until the next dated row.
    """
    processed: List[NewsDay] = []
    for time_text, headline, link in news:
        tokens = time_text.split()
        if not tokens:
            raise QueryError("news", f"News row {headline!r} has no timestamp.")
        if len(tokens) > 1:
            processed.append(NewsDay(date=parse_date(tokens[0], RATING_DATE_FMT)))
        if not processed:
            raise QueryError("news", f"First news row {headline!r} carries no date.")
        processed[-1].news.append(
            NewsItem(time=parse_time(tokens[-1]), headline=headline, link=link)
        )
    logger.debug("processed news into %d days", len(processed))
    return processed


def process_insider(insider: InsiderTable, year: Optional[int] = None) -> List[InsiderTransaction]:
    """Convert the column-major insider table into one record per row."""
    processed: List[InsiderTransaction] = []
    for i in range(len(insider.entity)):
        processed.append(
            InsiderTransaction(
                name=insider.entity[i],
                relationship=insider.relationship[i],
                date=parse_date(insider.date[i], INSIDER_DATE_FMT, year),
                transaction=slugify(insider.transaction[i]),
                cost=to_number(insider.cost[i]),
                shares=to_number(insider.shares[i]),
                value=to_number(insider.value[i]),
                shares_total=to_number(insider.total[i]),
                sec_filing_date=parse_date(insider.sec[i], SEC_FILING_FMT, year),
                sec_filing_link=insider.link[i],
            )
        )
    logger.debug("processed %d insider transactions", len(processed))
    return processed
