from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in [start, end]."""
    day = start
    while day <= end:
        yield day
        if day == end:
            break
        day += timedelta(days=1)
