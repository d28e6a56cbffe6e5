"""Utility helpers for expanding user supplied date windows into single days."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

MISSING_DATES_MESSAGE = "Please select both start and end dates"
INVERTED_RANGE_MESSAGE = "Start date must be before end date"


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(INVERTED_RANGE_MESSAGE)

    def days(self) -> Iterator[date]:
        """Yield every calendar day from ``start`` to ``end`` inclusive."""

        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def build_range(start: str | date | None, end: str | date | None) -> DateRange:
    """Validate raw endpoints and return a :class:`DateRange`.

    Both endpoints are required; an empty string counts as missing.
    """

    if not start or not end:
        raise ValueError(MISSING_DATES_MESSAGE)
    return DateRange(start=parse_date(start), end=parse_date(end))


def daily_dates(start: str | date, end: str | date) -> list[date]:
    """Return the inclusive list of days between ``start`` and ``end``."""

    return list(build_range(start, end).days())


def to_bidv_date(value: date) -> str:
    """Format ``value`` as ``DD/MM/YYYY``."""

    return value.strftime("%d/%m/%Y")
