"""CLI entry point for exporting bank exchange rates."""

from __future__ import annotations

import sys

from vnbank_fx.collect.export_rates import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
