"""CSV rendering of collected exchange-rate rows."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Sequence

from vnbank_fx.export.columns import EXPORT_HEADER, build_export_filename
from vnbank_fx.ingestion.models import ExchangeRateRow
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def render_csv(rows: Sequence[ExchangeRateRow]) -> str:
    """Return the header line plus one line per row.

    Fields holding a comma, quote or newline are quoted; everything else is
    written verbatim.
    """

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    writer.writerows(row.values() for row in rows)
    return buffer.getvalue()


class ExchangeRateCSVExporter:
    """Write collected rows to ``exchange_rates_*.csv`` files."""

    extension = "csv"
    media_type = CSV_MEDIA_TYPE

    def render(self, rows: Sequence[ExchangeRateRow]) -> bytes:
        if not rows:
            raise ValueError("records collection is empty")
        return render_csv(rows).encode("utf-8")

    def filename(self, result) -> str:
        return build_export_filename(
            result.bank,
            result.currency,
            result.date_range.start,
            result.date_range.end,
            self.extension,
        )

    def write(self, result, *, output_dir: Path | None = None) -> Path:
        """Persist ``result`` rows under ``output_dir`` and return the file path."""

        payload = self.render(result.rows)
        directory = Path(output_dir) if output_dir else Path.cwd()
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename(result)
        path.write_bytes(payload)
        LOGGER.info("Saved %s rows → %s", len(result.rows), path)
        return path
