"""Techcombank adapter backed by the bank's public content-integration JSON."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

import requests

from vnbank_fx.ingestion.errors import UpstreamHTTPError
from vnbank_fx.ingestion.models import Bank, ExchangeRateRow, field_or_na
from vnbank_fx.utils.date_range import parse_date
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

TECHCOMBANK_RATE_URL = (
    "https://techcombank.com/content/techcombank/web/vn/vi/cong-cu-tien-ich/ty-gia/"
    "_jcr_content.exchange-rates.{date}.integration.json"
)


def techcombank_url(rate_date: date | str) -> str:
    return TECHCOMBANK_RATE_URL.format(date=parse_date(rate_date).isoformat())


def parse_techcombank_rate(
    payload: dict[str, Any], rate_date: date, currency: str
) -> Optional[ExchangeRateRow]:
    """Map the entry labelled ``currency`` to a row, or ``None`` when absent."""

    if not isinstance(payload, dict):
        return None
    entries = (payload.get("exchangeRate") or {}).get("data") or []
    entry = next(
        (item for item in entries if isinstance(item, dict) and item.get("label") == currency),
        None,
    )
    if entry is None:
        return None
    return ExchangeRateRow(
        rate_date=rate_date,
        bank=Bank.TECHCOMBANK,
        currency=currency,
        ask_rate=field_or_na(entry, "askRate"),
        bid_rate_ck=field_or_na(entry, "bidRateCK"),
        bid_rate_tm=field_or_na(entry, "bidRateTM"),
        ask_rate_tm=field_or_na(entry, "askRateTM"),
        input_date=field_or_na(entry, "inputDate"),
    )


class TechcombankClient:
    """Fetch Techcombank rates with a single direct GET per day."""

    bank = Bank.TECHCOMBANK

    def __init__(self, *, session: Optional[requests.Session] = None, timeout: int = 30) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_payload(self, rate_date: date | str) -> dict[str, Any]:
        """Return the upstream JSON document for ``rate_date``.

        Raises :class:`UpstreamHTTPError` carrying the upstream status when the
        response is not successful.
        """

        url = techcombank_url(rate_date)
        response = self.session.get(url, timeout=self.timeout)
        if not response.ok:
            raise UpstreamHTTPError(response.status_code, f"Upstream error {response.status_code}")
        return response.json()

    def fetch_rate(self, rate_date: date, currency: str) -> Optional[ExchangeRateRow]:
        try:
            payload = self.fetch_payload(rate_date)
        except UpstreamHTTPError as exc:
            if exc.status_code == 404:
                LOGGER.debug("Techcombank has no data for %s", rate_date)
            else:
                LOGGER.error("Techcombank API returned %s for %s", exc.status_code, rate_date)
            return None
        except (requests.RequestException, ValueError) as exc:
            LOGGER.error("Techcombank fetch failed for %s: %s", rate_date, exc)
            return None
        row = parse_techcombank_rate(payload, rate_date, currency)
        if row is None:
            LOGGER.info("Techcombank published no %s rate for %s", currency, rate_date)
        return row


__all__ = ["TECHCOMBANK_RATE_URL", "TechcombankClient", "parse_techcombank_rate", "techcombank_url"]
