"""Export encoders for collected rate rows."""

from __future__ import annotations

from vnbank_fx.export.columns import EXPORT_HEADER, build_export_filename, sanitize_currency
from vnbank_fx.export.csv_export import ExchangeRateCSVExporter, render_csv
from vnbank_fx.export.xlsx_export import ExchangeRateXLSXExporter, render_xlsx

EXPORTERS = {
    "csv": ExchangeRateCSVExporter,
    "xlsx": ExchangeRateXLSXExporter,
}


def get_exporter(fmt: str) -> ExchangeRateCSVExporter:
    """Return an exporter instance for ``csv`` or ``xlsx``."""

    try:
        return EXPORTERS[fmt.lower()]()
    except KeyError as exc:
        raise ValueError(f"Unsupported export format: {fmt}") from exc


__all__ = [
    "EXPORTERS",
    "EXPORT_HEADER",
    "ExchangeRateCSVExporter",
    "ExchangeRateXLSXExporter",
    "build_export_filename",
    "get_exporter",
    "render_csv",
    "render_xlsx",
    "sanitize_currency",
]
