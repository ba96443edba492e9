from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Duration:
    """A millisecond count split into clock fields."""

    mask: str
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


@dataclass(frozen=True)
class MonthEntry:
    """One month of a date range, with its 0-based month index."""

    date: date
    year: int
    month: int
    month_name: str
