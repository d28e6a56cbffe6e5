"""
API: exchange-rate routes.
Upstream passthroughs per bank plus range collection and file export.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from vnbank_fx.api.dependencies import (
    AdapterFactory,
    get_adapter_factory,
    get_bidv_client,
    get_request_delay,
    get_techcombank_client,
)
from vnbank_fx.collect.range_fetch import NO_DATA_MESSAGE, RangeFetchResult, fetch_rate_range
from vnbank_fx.export import get_exporter
from vnbank_fx.ingestion.bidv import BIDVClient
from vnbank_fx.ingestion.currencies import BANK_CURRENCIES, currency_options
from vnbank_fx.ingestion.errors import NoTimeRecordsError, UpstreamHTTPError
from vnbank_fx.ingestion.models import Bank
from vnbank_fx.ingestion.techcombank import TechcombankClient
from vnbank_fx.utils.date_range import parse_date
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

MISSING_DATE_MESSAGE = "Missing ?date=YYYY-MM-DD"
GENERIC_ERROR_MESSAGE = "An error occurred while fetching data"

router = APIRouter(prefix="/api/exchange", tags=["Exchange"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _parse_date_param(raw: Optional[str]) -> date | JSONResponse:
    if not raw:
        return _error(MISSING_DATE_MESSAGE, 400)
    try:
        return parse_date(raw)
    except ValueError:
        return _error(f"Invalid date {raw!r}; expected YYYY-MM-DD", 400)


def _collect(
    factory: AdapterFactory,
    delay: float,
    bank: str,
    currency: Optional[str],
    start: Optional[str],
    end: Optional[str],
) -> RangeFetchResult | JSONResponse:
    try:
        resolved = Bank.parse(bank)
        return fetch_rate_range(
            resolved,
            currency,
            start,
            end,
            adapter=factory(resolved),
            delay_seconds=delay,
        )
    except ValueError as exc:
        return _error(str(exc), 400)
    except Exception:
        LOGGER.exception("Range fetch aborted for %s %s", bank, currency)
        return _error(GENERIC_ERROR_MESSAGE, 500)


# ---------------------------------------------------------------------------
# Upstream passthroughs
# ---------------------------------------------------------------------------


@router.get("/techcombank")
def get_techcombank_rates(
    date_param: Optional[str] = Query(None, alias="date"),
    client: TechcombankClient = Depends(get_techcombank_client),
) -> Any:
    """Return Techcombank's rate document for one day unchanged."""
    rate_date = _parse_date_param(date_param)
    if isinstance(rate_date, JSONResponse):
        return rate_date
    try:
        return client.fetch_payload(rate_date)
    except UpstreamHTTPError as exc:
        return _error(f"Upstream error {exc.status_code}", exc.status_code)
    except Exception as exc:
        LOGGER.error("Techcombank API error: %s", exc)
        return _error("Failed to fetch upstream", 502)


@router.get("/bidv")
def get_bidv_rates(
    date_param: Optional[str] = Query(None, alias="date"),
    client: BIDVClient = Depends(get_bidv_client),
) -> Any:
    """Return BIDV's latest rate-detail document for one day unchanged.

    Any relay failure, upstream error statuses included, answers 502.
    """
    rate_date = _parse_date_param(date_param)
    if isinstance(rate_date, JSONResponse):
        return rate_date
    try:
        return client.fetch_payload(rate_date)
    except NoTimeRecordsError as exc:
        return _error(str(exc), 404)
    except Exception as exc:
        LOGGER.error("BIDV API error: %s", exc)
        return _error("Failed to fetch from BIDV", 502)


# ---------------------------------------------------------------------------
# Catalog, collection and export
# ---------------------------------------------------------------------------


@router.get("/currencies")
def get_currencies(bank: Optional[str] = None) -> Any:
    if bank is None:
        return {
            key.value: [{"value": o.value, "label": o.label} for o in options]
            for key, options in BANK_CURRENCIES.items()
        }
    try:
        options = currency_options(bank)
    except ValueError as exc:
        return _error(str(exc), 400)
    return [{"value": o.value, "label": o.label} for o in options]


@router.get("/rates")
def get_rate_range(
    bank: str = Bank.TECHCOMBANK.value,
    currency: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    factory: AdapterFactory = Depends(get_adapter_factory),
    delay: float = Depends(get_request_delay),
) -> Any:
    """Collect one row per day and return them with the no-data message when empty."""
    result = _collect(factory, delay, bank, currency, start, end)
    if isinstance(result, JSONResponse):
        return result
    return result.to_dict()


@router.get("/export")
def export_rate_range(
    bank: str = Bank.TECHCOMBANK.value,
    currency: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    fmt: str = Query("csv", alias="format"),
    factory: AdapterFactory = Depends(get_adapter_factory),
    delay: float = Depends(get_request_delay),
) -> Any:
    """Collect the range and return it as a CSV or XLSX attachment."""
    try:
        exporter = get_exporter(fmt)
    except ValueError as exc:
        return _error(str(exc), 400)
    result = _collect(factory, delay, bank, currency, start, end)
    if isinstance(result, JSONResponse):
        return result
    if result.is_empty:
        return _error(NO_DATA_MESSAGE, 404)
    filename = exporter.filename(result)
    return Response(
        content=exporter.render(result.rows),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
