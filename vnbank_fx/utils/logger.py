"""Logging utilities for the vnbank_fx package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "vnbank_fx") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger("vnbank_fx")
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Adjust the package logger level after startup (e.g. from ``--verbose``)."""

    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("vnbank_fx").setLevel(level)
