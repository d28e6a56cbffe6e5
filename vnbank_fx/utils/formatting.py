"""Display helpers for rate strings shown in terminal tables."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

PASSTHROUGH_VALUES = frozenset({"N/A", "", "-"})


def format_rate(value: str | None) -> str | None:
    """Return ``value`` regrouped with thousands separators.

    Upstream rates arrive as strings such as ``"25,450"`` or ``"25450.5"``.
    Placeholders and anything that does not parse as a number are returned
    untouched. At most three fraction digits are kept.
    """

    if value is None or value in PASSTHROUGH_VALUES:
        return value
    try:
        number = Decimal(value.replace(",", "").strip())
    except InvalidOperation:
        return value
    if not number.is_finite():
        return value
    rounded = round(number, 3)
    if rounded == rounded.to_integral_value():
        return f"{int(rounded):,}"
    return f"{rounded:,.3f}".rstrip("0")
