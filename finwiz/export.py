"""JSON and tabular views of scraped records."""
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .convert import is_nan
from .models import InsiderTransaction, NewsDay, RatingEvent, SnapshotRecord

RATING_COLUMNS = ["date", "action", "org", "rating_before", "rating_after", "target_before", "target_after"]
NEWS_COLUMNS = ["date", "time", "headline", "link"]
INSIDER_COLUMNS = [
    "name", "relationship", "date", "transaction", "cost", "shares",
    "value", "shares_total", "sec_filing_date", "sec_filing_link",
]


def jsonable(value):
    """Records as JSON-safe data: dataclasses to dicts, NaN to None."""
    if isinstance(value, list):
        return [jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: jsonable(v) for k, v in value.items()}
    if hasattr(value, "to_dict"):
        return jsonable(value.to_dict())
    if is_nan(value):
        return None
    return value


def financials_frame(financials: SnapshotRecord) -> pd.DataFrame:
    """field, value - one row per snapshot key in page order."""
    return pd.DataFrame(list(financials.items()), columns=["field", "value"])


def ratings_frame(ratings: List[RatingEvent]) -> pd.DataFrame:
    if not ratings:
        return pd.DataFrame(columns=RATING_COLUMNS)
    df = pd.json_normalize([r.to_dict() for r in ratings], sep="_")
    return df[RATING_COLUMNS]


def news_frame(news: List[NewsDay]) -> pd.DataFrame:
    """One row per headline, with the day's date repeated."""
    rows = []
    for day in news:
        for item in day.news:
            rows.append({"date": day.date, "time": item.time, "headline": item.headline, "link": item.link})
    return pd.DataFrame(rows, columns=NEWS_COLUMNS)


def insider_frame(insider: List[InsiderTransaction]) -> pd.DataFrame:
    return pd.DataFrame([t.to_dict() for t in insider], columns=INSIDER_COLUMNS)


def write_csv(ticker: str, frames: Dict[str, pd.DataFrame], out_dir: str) -> List[Path]:
    """Write each frame to <out_dir>/<ticker>_<category>.csv; returns the paths written."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for category, df in frames.items():
        path = out / f"{ticker.lower()}_{category}.csv"
        df.to_csv(path, index=False)
        written.append(path)
    return written
