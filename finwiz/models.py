"""Finviz quote scraper - record types produced by the normalizers."""
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Tuple, Union

# (label, value) cell pair from the snapshot table
RawPair = Tuple[str, str]

# Open-ended: keys are slugs of whatever labels the page carries
SnapshotRecord = Dict[str, Union[float, str]]


@dataclass
class RatingChange:
    before: str  # "" when the analyst has just initiated coverage
    after: str


@dataclass
class TargetChange:
    before: Union[float, str]  # "" when no prior target
    after: float


@dataclass
class RatingEvent:
    """One row of the analyst ratings table."""
    date: str  # YYYY-MM-DD
    action: str
    org: str
    rating: RatingChange
    target: TargetChange

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class NewsItem:
    time: str  # HH:MM, 24h
    headline: str
    link: str


@dataclass
class NewsDay:
    """All headlines published on one date, newest first."""
    date: str
    news: List[NewsItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class InsiderTransaction:
    """One row of the insider trading table."""
    name: str
    relationship: str
    date: str
    transaction: str
    cost: float
    shares: float
    value: float
    shares_total: float
    sec_filing_date: str
    sec_filing_link: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class InsiderTable:
    """Column-major insider table as scraped, header row already removed."""
    entity: List[str]
    relationship: List[str]
    date: List[str]
    transaction: List[str]
    cost: List[str]
    shares: List[str]
    value: List[str]
    total: List[str]
    sec: List[str]
    link: List[str]

    def __len__(self) -> int:
        return len(self.entity)
