"""CLI + helpers for collecting bank rates over a date range and exporting them."""

from __future__ import annotations

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Sequence

from vnbank_fx.collect.range_fetch import RangeFetchResult, fetch_rate_range
from vnbank_fx.config import Settings, load_settings
from vnbank_fx.export import EXPORT_HEADER, EXPORTERS, get_exporter
from vnbank_fx.ingestion.currencies import currency_options
from vnbank_fx.ingestion.models import Bank
from vnbank_fx.ingestion.strategy import build_adapter
from vnbank_fx.utils.formatting import format_rate
from vnbank_fx.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while fetching data"

__all__ = ["collect_and_export", "format_table", "parse_args", "main"]


def _default_dates() -> tuple[str, str]:
    today = date.today()
    return (today - timedelta(days=7)).isoformat(), today.isoformat()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    default_start, default_end = _default_dates()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--bank",
        choices=[bank.value for bank in Bank],
        default=Bank.TECHCOMBANK.value,
        help="Bank to query (default: techcombank)",
    )
    parser.add_argument(
        "--currency",
        help="Currency label as published by the bank (default: the bank's first entry)",
    )
    parser.add_argument("--from", dest="start", default=default_start, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="end", default=default_end, help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "--format",
        dest="formats",
        choices=[*EXPORTERS, "both", "none"],
        default="csv",
        help="Export format written after fetching",
    )
    parser.add_argument("--output-dir", dest="output_dir", help="Directory receiving export files")
    parser.add_argument(
        "--list-currencies",
        action="store_true",
        help="Print the currencies published by --bank and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def format_table(result: RangeFetchResult) -> str:
    """Render ``result`` rows as an aligned plain-text table."""

    header = EXPORT_HEADER
    lines = [header]
    for row in result.rows:
        lines.append(
            (
                row.rate_date.isoformat(),
                row.bank.display_name,
                row.currency,
                format_rate(row.ask_rate),
                format_rate(row.bid_rate_ck),
                format_rate(row.bid_rate_tm),
                format_rate(row.ask_rate_tm),
                row.input_date,
            )
        )
    widths = [max(len(str(line[col])) for line in lines) for col in range(len(header))]
    rendered = []
    for line in lines:
        cells = []
        for col, value in enumerate(line):
            # Rate columns are right aligned like a spreadsheet.
            cells.append(str(value).rjust(widths[col]) if 3 <= col <= 6 else str(value).ljust(widths[col]))
        rendered.append("  ".join(cells).rstrip())
    return "\n".join(rendered)


def collect_and_export(
    bank: Bank | str,
    currency: str | None,
    start: str | date | None,
    end: str | date | None,
    *,
    formats: Sequence[str] = ("csv",),
    output_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> tuple[RangeFetchResult, list[Path]]:
    """Fetch the range and write one file per requested format.

    Nothing is written when the range produced no rows.
    """

    config = settings or Settings()
    result = fetch_rate_range(
        bank,
        currency,
        start,
        end,
        adapter=build_adapter(bank, settings=config),
        delay_seconds=config.request_delay_seconds,
    )
    written: list[Path] = []
    if result.is_empty:
        return result, written
    directory = Path(output_dir) if output_dir else config.output_dir
    for fmt in formats:
        written.append(get_exporter(fmt).write(result, output_dir=directory))
    return result, written


def _resolve_formats(choice: str) -> tuple[str, ...]:
    if choice == "both":
        return tuple(EXPORTERS)
    if choice == "none":
        return ()
    return (choice,)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    set_level("DEBUG" if args.verbose else settings.log_level)

    if args.list_currencies:
        for option in currency_options(args.bank):
            print(f"{option.value}\t{option.label}")
        return 0

    try:
        result, written = collect_and_export(
            args.bank,
            args.currency,
            args.start,
            args.end,
            formats=_resolve_formats(args.formats),
            output_dir=args.output_dir,
            settings=settings,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except Exception:
        LOGGER.exception("Range fetch aborted")
        print(GENERIC_ERROR_MESSAGE, file=sys.stderr)
        return 1

    if result.is_empty:
        print(result.message)
        return 0
    print(
        f"{result.currency} rates from {result.bank.value.upper()} from "
        f"{result.date_range.start} to {result.date_range.end} ({len(result.rows)} records)"
    )
    print(format_table(result))
    for path in written:
        print(f"Exported → {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
