"""BIDV adapter: a time-search lookup followed by a rate-detail query, both proxied."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import urlencode

import requests

from vnbank_fx.ingestion.errors import FetchExhaustedError, NoTimeRecordsError, UpstreamHTTPError
from vnbank_fx.ingestion.models import NOT_AVAILABLE, Bank, ExchangeRateRow, field_or_na
from vnbank_fx.ingestion.proxy import ProxyFetcher
from vnbank_fx.utils.date_range import parse_date, to_bidv_date
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

BIDV_SERVICES_URL = "https://bidv.com.vn/ServicesBIDV"
BIDV_TIME_SEARCH_URL = f"{BIDV_SERVICES_URL}/ExchangeDetailSearchTimeServlet"
BIDV_DETAIL_URL = f"{BIDV_SERVICES_URL}/ExchangeDetailServlet"


def time_search_url(bidv_date: str) -> str:
    return f"{BIDV_TIME_SEARCH_URL}?{urlencode({'date': bidv_date}, safe='/')}"


def detail_url(bidv_date: str, namerecord: str) -> str:
    query = urlencode({"date": bidv_date, "time": namerecord}, safe="/")
    return f"{BIDV_DETAIL_URL}?{query}"


def _numeric_time(record: Mapping[str, Any]) -> Optional[float]:
    try:
        return float(record.get("time"))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def select_latest_record(records: Iterable[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return the record with the highest ``time``.

    ``time`` values are compared as numbers when every record carries a
    numeric one, otherwise as strings (``"09:00"`` < ``"15:30"``). Ties keep
    the earliest record. Raises :class:`NoTimeRecordsError` when ``records``
    is empty.
    """

    candidates = list(records)
    if not candidates:
        raise NoTimeRecordsError()
    numeric = [_numeric_time(record) for record in candidates]
    if all(value is not None for value in numeric):
        keys: list[Any] = numeric
    else:
        keys = ["" if record.get("time") is None else str(record["time"]) for record in candidates]
    latest = 0
    for index in range(1, len(candidates)):
        if keys[index] > keys[latest]:
            latest = index
    return candidates[latest]


def _input_date(payload: Mapping[str, Any]) -> str:
    parts = [str(payload[key]) for key in ("day_vi", "hour") if payload.get(key)]
    return " ".join(parts) if parts else NOT_AVAILABLE


def parse_bidv_rate(
    payload: dict[str, Any], rate_date: date, currency: str
) -> Optional[ExchangeRateRow]:
    """Map the detail entry for ``currency`` to a row, or ``None`` when absent.

    BIDV publishes a single selling price, so ``ban`` fills both ask columns.
    """

    if not isinstance(payload, dict):
        return None
    entries = payload.get("data") or []
    entry = next(
        (item for item in entries if isinstance(item, dict) and item.get("currency") == currency),
        None,
    )
    if entry is None:
        return None
    return ExchangeRateRow(
        rate_date=rate_date,
        bank=Bank.BIDV,
        currency=currency,
        ask_rate=field_or_na(entry, "ban"),
        bid_rate_ck=field_or_na(entry, "muaCk"),
        bid_rate_tm=field_or_na(entry, "muaTm"),
        ask_rate_tm=field_or_na(entry, "ban"),
        input_date=_input_date(payload),
    )


class BIDVClient:
    """Fetch BIDV rates; BIDV is only reachable through proxy relays."""

    bank = Bank.BIDV

    def __init__(self, *, proxy: Optional[ProxyFetcher] = None) -> None:
        self.proxy = proxy or ProxyFetcher()

    def fetch_payload(self, rate_date: date | str) -> dict[str, Any]:
        """Return the rate-detail JSON document for the day's latest publication."""

        bidv_date = to_bidv_date(parse_date(rate_date))
        time_data = self._get_json(time_search_url(bidv_date))
        records = time_data.get("data") if isinstance(time_data, dict) else None
        if not records:
            raise NoTimeRecordsError()
        latest = select_latest_record(records)
        namerecord = latest.get("namerecord")
        if not namerecord:
            raise NoTimeRecordsError("Latest time record has no namerecord")
        LOGGER.debug("Using BIDV record %s (time=%s) for %s", namerecord, latest.get("time"), bidv_date)
        return self._get_json(detail_url(bidv_date, str(namerecord)))

    def _get_json(self, url: str) -> Any:
        return self.proxy.get(url).json()

    def fetch_rate(self, rate_date: date, currency: str) -> Optional[ExchangeRateRow]:
        try:
            payload = self.fetch_payload(rate_date)
        except UpstreamHTTPError as exc:
            if exc.status_code == 404:
                LOGGER.debug("BIDV has no data for %s: %s", rate_date, exc)
            else:
                LOGGER.error("BIDV API returned %s for %s", exc.status_code, rate_date)
            return None
        except (FetchExhaustedError, requests.RequestException, ValueError) as exc:
            LOGGER.error("BIDV fetch failed for %s: %s", rate_date, exc)
            return None
        row = parse_bidv_rate(payload, rate_date, currency)
        if row is None:
            LOGGER.info("BIDV published no %s rate for %s", currency, rate_date)
        return row


__all__ = [
    "BIDVClient",
    "BIDV_DETAIL_URL",
    "BIDV_TIME_SEARCH_URL",
    "detail_url",
    "parse_bidv_rate",
    "select_latest_record",
    "time_search_url",
]
