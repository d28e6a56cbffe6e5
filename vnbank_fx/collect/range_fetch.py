"""Sequential day-by-day collection of rates for one bank and currency."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from vnbank_fx.ingestion.currencies import resolve_currency
from vnbank_fx.ingestion.models import Bank, ExchangeRateRow
from vnbank_fx.ingestion.strategy import RateAdapter, build_adapter
from vnbank_fx.utils.date_range import DateRange, build_range
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

NO_DATA_MESSAGE = "No data found for the selected date range"
REQUEST_DELAY_SECONDS = 0.2


@dataclass(slots=True)
class RangeFetchResult:
    """Rows collected for one (bank, currency, range) request."""

    bank: Bank
    currency: str
    date_range: DateRange
    rows: list[ExchangeRateRow] = field(default_factory=list)
    missing_dates: list[date] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def message(self) -> str | None:
        """User-facing note; only set when nothing was found."""

        return NO_DATA_MESSAGE if self.is_empty else None

    def to_dict(self) -> dict[str, object]:
        return {
            "bank": self.bank.value,
            "currency": self.currency,
            "start": self.date_range.start.isoformat(),
            "end": self.date_range.end.isoformat(),
            "count": len(self.rows),
            "rows": [row.to_dict() for row in self.rows],
            "missing_dates": [day.isoformat() for day in self.missing_dates],
            "message": self.message,
        }


def fetch_rate_range(
    bank: Bank | str,
    currency: str | None,
    start: str | date | None,
    end: str | date | None,
    *,
    adapter: Optional[RateAdapter] = None,
    delay_seconds: float = REQUEST_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> RangeFetchResult:
    """Fetch one row per day between ``start`` and ``end`` inclusive.

    Input problems (missing endpoints, inverted range, unknown bank or
    currency) raise :class:`ValueError` before any request is made. Days the
    adapter reports nothing for are skipped. Requests never overlap and are
    spaced by ``delay_seconds`` to stay under upstream rate limits.
    """

    resolved_bank = Bank.parse(bank)
    date_range = build_range(start, end)
    resolved_currency = resolve_currency(resolved_bank, currency)
    rate_adapter = adapter or build_adapter(resolved_bank)

    result = RangeFetchResult(bank=resolved_bank, currency=resolved_currency, date_range=date_range)
    LOGGER.info(
        "Fetching %s %s rates from %s to %s (%s days)",
        resolved_bank.display_name,
        resolved_currency,
        date_range.start,
        date_range.end,
        len(date_range),
    )
    for index, day in enumerate(date_range.days()):
        if index and delay_seconds > 0:
            sleep(delay_seconds)
        row = rate_adapter.fetch_rate(day, resolved_currency)
        if row is None:
            result.missing_dates.append(day)
            continue
        result.rows.append(row)

    if result.is_empty:
        LOGGER.info(NO_DATA_MESSAGE)
    else:
        LOGGER.info(
            "Collected %s rows (%s days without data)", len(result.rows), len(result.missing_dates)
        )
    return result


__all__ = ["NO_DATA_MESSAGE", "REQUEST_DELAY_SECONDS", "RangeFetchResult", "fetch_rate_range"]
