"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping

NOT_AVAILABLE = "N/A"


class Bank(str, Enum):
    """Banks whose published rates can be collected."""

    TECHCOMBANK = "techcombank"
    BIDV = "bidv"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: "str | Bank") -> "Bank":
        """Accept enum members, keys (``bidv``) or display names (``BIDV``)."""

        if isinstance(value, Bank):
            return value
        lowered = str(value).strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(f"Unsupported bank: {value}")


_DISPLAY_NAMES = {Bank.TECHCOMBANK: "Techcombank", Bank.BIDV: "BIDV"}


@dataclass(frozen=True, slots=True)
class ExchangeRateRow:
    """One normalised rate record for a bank, a day and a currency.

    Rate values are kept exactly as published (display strings that may carry
    thousands separators) or ``"N/A"`` when the upstream omitted them.
    """

    rate_date: date
    bank: Bank
    currency: str
    ask_rate: str = NOT_AVAILABLE
    bid_rate_ck: str = NOT_AVAILABLE
    bid_rate_tm: str = NOT_AVAILABLE
    ask_rate_tm: str = NOT_AVAILABLE
    input_date: str = NOT_AVAILABLE

    def values(self) -> tuple[str, ...]:
        """Return the eight export columns in their fixed order."""

        return (
            self.rate_date.isoformat(),
            self.bank.display_name,
            self.currency,
            self.ask_rate,
            self.bid_rate_ck,
            self.bid_rate_tm,
            self.ask_rate_tm,
            self.input_date,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "date": self.rate_date.isoformat(),
            "bank": self.bank.display_name,
            "currency": self.currency,
            "ask_rate": self.ask_rate,
            "bid_rate_ck": self.bid_rate_ck,
            "bid_rate_tm": self.bid_rate_tm,
            "ask_rate_tm": self.ask_rate_tm,
            "input_date": self.input_date,
        }


def field_or_na(entry: Mapping[str, Any], key: str) -> str:
    """Return ``entry[key]`` as text, or ``"N/A"`` when missing or empty."""

    value = entry.get(key)
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)
