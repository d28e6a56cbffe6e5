"""Spreadsheet rendering of collected exchange-rate rows."""

from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from vnbank_fx.export.columns import EXPORT_HEADER
from vnbank_fx.export.csv_export import ExchangeRateCSVExporter
from vnbank_fx.ingestion.models import ExchangeRateRow

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_NAME = "Exchange Rates"


def rows_to_frame(rows: Sequence[ExchangeRateRow]) -> pd.DataFrame:
    """Build a header-keyed frame; every cell stays a string."""

    records = [dict(zip(EXPORT_HEADER, row.values())) for row in rows]
    return pd.DataFrame.from_records(records, columns=list(EXPORT_HEADER)).astype(str)


def render_xlsx(rows: Sequence[ExchangeRateRow]) -> bytes:
    """Return an in-memory single-sheet workbook holding ``rows``."""

    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        rows_to_frame(rows).to_excel(writer, sheet_name=SHEET_NAME, index=False)
    return buffer.getvalue()


class ExchangeRateXLSXExporter(ExchangeRateCSVExporter):
    """Same naming and persistence as the CSV exporter, workbook payload."""

    extension = "xlsx"
    media_type = XLSX_MEDIA_TYPE

    def render(self, rows: Sequence[ExchangeRateRow]) -> bytes:
        if not rows:
            raise ValueError("records collection is empty")
        return render_xlsx(rows)
