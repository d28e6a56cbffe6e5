"""Static catalog of the currency labels each bank publishes."""

from __future__ import annotations

from dataclasses import dataclass

from vnbank_fx.ingestion.models import Bank


@dataclass(frozen=True, slots=True)
class CurrencyOption:
    """A currency as matched upstream (``value``) and as shown to users (``label``)."""

    value: str
    label: str


def _same(*values: str) -> tuple[CurrencyOption, ...]:
    return tuple(CurrencyOption(value, value) for value in values)


# Techcombank keys rows by denomination-qualified labels, BIDV by compact codes.
BANK_CURRENCIES: dict[Bank, tuple[CurrencyOption, ...]] = {
    Bank.TECHCOMBANK: _same(
        "USD (50,100)",
        "USD (1,2)",
        "USD (5,10,20)",
        "EUR",
        "GBP",
        "JPY",
        "AUD",
        "CAD",
        "CHF",
        "CNY",
        "HKD",
        "SGD",
        "THB",
        "KRW",
        "NZD",
    ),
    Bank.BIDV: (
        CurrencyOption("USD", "USD"),
        CurrencyOption("USD(1-2-5)", "USD (1-2-5)"),
        CurrencyOption("USD(10-20)", "USD (10-20)"),
        *_same(
            "EUR",
            "GBP",
            "JPY",
            "AUD",
            "CAD",
            "CHF",
            "CNY",
            "HKD",
            "SGD",
            "THB",
            "KRW",
            "NZD",
            "SEK",
            "DKK",
            "NOK",
            "RUB",
            "TWD",
            "MYR",
            "SAR",
            "KWD",
            "LAK",
        ),
        CurrencyOption("XAU", "Gold (XAU)"),
    ),
}


def currency_options(bank: Bank | str) -> tuple[CurrencyOption, ...]:
    return BANK_CURRENCIES[Bank.parse(bank)]


def currency_values(bank: Bank | str) -> list[str]:
    """Return the upstream currency values for ``bank`` in display order."""

    return [option.value for option in currency_options(bank)]


def default_currency(bank: Bank | str) -> str:
    """Return the currency selected when switching to ``bank``."""

    return currency_options(bank)[0].value


def resolve_currency(bank: Bank | str, currency: str | None) -> str:
    """Return ``currency`` when the bank publishes it, the bank default when omitted."""

    if not currency:
        return default_currency(bank)
    if currency not in currency_values(bank):
        raise ValueError(f"{currency!r} is not published by {Bank.parse(bank).display_name}")
    return currency


__all__ = [
    "BANK_CURRENCIES",
    "CurrencyOption",
    "currency_options",
    "currency_values",
    "default_currency",
    "resolve_currency",
]
