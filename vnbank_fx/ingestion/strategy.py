"""Abstractions for pluggable per-bank rate adapters."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol

from vnbank_fx.ingestion.models import Bank, ExchangeRateRow

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import requests

    from vnbank_fx.config import Settings


class RateAdapter(Protocol):
    """Contract for turning one calendar day into at most one rate row.

    Implementations return ``None`` when the bank has nothing for that day or
    when the upstream could not be reached; only unexpected failures propagate.
    """

    bank: Bank

    def fetch_rate(self, rate_date: date, currency: str) -> Optional[ExchangeRateRow]:
        ...  # pragma: no cover - protocol definition


def build_adapter(
    bank: Bank | str,
    *,
    session: Optional["requests.Session"] = None,
    settings: Optional["Settings"] = None,
) -> RateAdapter:
    """Instantiate the adapter for ``bank`` configured from ``settings``."""

    from vnbank_fx.config import Settings
    from vnbank_fx.ingestion.bidv import BIDVClient
    from vnbank_fx.ingestion.proxy import ProxyFetcher
    from vnbank_fx.ingestion.techcombank import TechcombankClient

    config = settings or Settings()
    resolved = Bank.parse(bank)
    if resolved is Bank.TECHCOMBANK:
        return TechcombankClient(session=session, timeout=config.timeout)
    proxy = ProxyFetcher(
        session=session,
        tries=config.proxy_retries,
        backoff_seconds=config.proxy_backoff_seconds,
        timeout=config.timeout,
    )
    return BIDVClient(proxy=proxy)


__all__ = ["RateAdapter", "build_adapter"]
