"""Public interface for the vnbank_fx package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Optional

from vnbank_fx.collect.range_fetch import NO_DATA_MESSAGE, RangeFetchResult, fetch_rate_range
from vnbank_fx.config import Settings, load_settings
from vnbank_fx.export import get_exporter
from vnbank_fx.ingestion.currencies import CurrencyOption, currency_options, default_currency
from vnbank_fx.ingestion.errors import FetchExhaustedError, NoTimeRecordsError, UpstreamHTTPError
from vnbank_fx.ingestion.models import NOT_AVAILABLE, Bank, ExchangeRateRow
from vnbank_fx.ingestion.strategy import RateAdapter, build_adapter

__all__ = [
    "__version__",
    "Bank",
    "ExchangeRateRow",
    "FetchExhaustedError",
    "NOT_AVAILABLE",
    "NO_DATA_MESSAGE",
    "NoTimeRecordsError",
    "RangeFetchResult",
    "Settings",
    "UpstreamHTTPError",
    "VnBankFx",
    "fetch_rate_range",
]

try:
    __version__ = importlib_metadata.version("vnbank-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class VnBankFx:
    """Package facade: pick a bank, fetch a date range, export the rows.

    The facade remembers the active bank and currency the way a form would:
    switching bank resets the currency to that bank's default entry. The most
    recent fetch result is kept until the next fetch replaces it.
    """

    __slots__ = ("settings", "_bank", "_currency", "_adapters", "last_result")

    __version__ = __version__

    def __init__(self, settings: Settings | None = None, *, bank: Bank | str = Bank.TECHCOMBANK) -> None:
        self.settings = settings or load_settings()
        self._bank = Bank.parse(bank)
        self._currency = default_currency(self._bank)
        self._adapters: dict[Bank, RateAdapter] = {}
        self.last_result: Optional[RangeFetchResult] = None

    @property
    def bank(self) -> Bank:
        return self._bank

    @bank.setter
    def bank(self, value: Bank | str) -> None:
        self._bank = Bank.parse(value)
        self._currency = default_currency(self._bank)

    @property
    def currency(self) -> str:
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        if value not in {option.value for option in currency_options(self._bank)}:
            raise ValueError(f"{value!r} is not published by {self._bank.display_name}")
        self._currency = value

    def currencies(self) -> tuple[CurrencyOption, ...]:
        """Return the currencies the active bank publishes."""

        return currency_options(self._bank)

    def use_adapter(self, adapter: RateAdapter) -> None:
        """Replace the adapter used for ``adapter.bank`` (handy for tests and mirrors)."""

        self._adapters[adapter.bank] = adapter

    def _adapter(self) -> RateAdapter:
        if self._bank not in self._adapters:
            self._adapters[self._bank] = build_adapter(self._bank, settings=self.settings)
        return self._adapters[self._bank]

    def fetch(self, start: str | date, end: str | date) -> RangeFetchResult:
        """Fetch the active bank/currency for ``start`` → ``end`` inclusive."""

        self.last_result = None
        self.last_result = fetch_rate_range(
            self._bank,
            self._currency,
            start,
            end,
            adapter=self._adapter(),
            delay_seconds=self.settings.request_delay_seconds,
        )
        return self.last_result

    def export(self, fmt: str = "csv", *, output_dir: str | Path | None = None) -> Path:
        """Write the last fetch result as ``csv`` or ``xlsx`` and return the file path."""

        if self.last_result is None or self.last_result.is_empty:
            raise ValueError("Nothing to export; fetch a date range with data first")
        directory = Path(output_dir) if output_dir else self.settings.output_dir
        return get_exporter(fmt).write(self.last_result, output_dir=directory)
