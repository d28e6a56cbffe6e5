"""Column layout and file naming shared by every export format."""

from __future__ import annotations

import re
from datetime import date

from vnbank_fx.ingestion.models import Bank
from vnbank_fx.utils.date_range import parse_date

EXPORT_HEADER: tuple[str, ...] = (
    "Date",
    "Bank",
    "Currency",
    "Ask Rate",
    "Bid Rate CK",
    "Bid Rate TM",
    "Ask Rate TM",
    "Input Date",
)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def sanitize_currency(currency: str) -> str:
    """Replace every non-alphanumeric character with ``_``."""

    return _UNSAFE_CHARS.sub("_", currency)


def build_export_filename(
    bank: Bank | str, currency: str, start: str | date, end: str | date, extension: str
) -> str:
    """Return ``exchange_rates_{bank}_{currency}_{start}_to_{end}.{ext}``."""

    bank_key = Bank.parse(bank).value
    return (
        f"exchange_rates_{bank_key}_{sanitize_currency(currency)}_"
        f"{parse_date(start).isoformat()}_to_{parse_date(end).isoformat()}.{extension.lstrip('.')}"
    )


__all__ = ["EXPORT_HEADER", "build_export_filename", "sanitize_currency"]
