"""Range collection utilities for :mod:`vnbank_fx`."""

from __future__ import annotations

from typing import Any

__all__ = ["fetch_rate_range", "collect_and_export", "RangeFetchResult", "NO_DATA_MESSAGE"]


def __getattr__(name: str) -> Any:
    """Lazily expose collection helpers so ``python -m`` entry points stay import-light."""

    if name in {"fetch_rate_range", "RangeFetchResult", "NO_DATA_MESSAGE"}:
        from vnbank_fx.collect import range_fetch

        return getattr(range_fetch, name)
    if name == "collect_and_export":
        from vnbank_fx.collect.export_rates import collect_and_export as _collect

        return _collect
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
