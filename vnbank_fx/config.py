"""Runtime settings resolved from environment variables (and a local ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

__all__ = ["LOG_LEVELS", "Settings", "load_settings"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Knobs shared by the CLI, the HTTP service and the facade."""

    request_delay_seconds: float = 0.2
    proxy_retries: int = 2
    proxy_backoff_seconds: float = 0.4
    timeout: int = 30
    output_dir: Path = field(default_factory=Path.cwd)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        defaults = cls()
        output_dir = env.get("VNBANK_FX_OUTPUT_DIR")
        return cls(
            request_delay_seconds=_read_float(
                env, "VNBANK_FX_REQUEST_DELAY", defaults.request_delay_seconds
            ),
            proxy_retries=_read_int(env, "VNBANK_FX_PROXY_RETRIES", defaults.proxy_retries),
            proxy_backoff_seconds=_read_float(
                env, "VNBANK_FX_PROXY_BACKOFF", defaults.proxy_backoff_seconds
            ),
            timeout=_read_int(env, "VNBANK_FX_TIMEOUT", defaults.timeout),
            output_dir=Path(output_dir) if output_dir else defaults.output_dir,
            log_level=_read_level(env, "VNBANK_FX_LOG_LEVEL", defaults.log_level),
        )


def load_settings(*, dotenv: bool = True) -> Settings:
    """Load ``.env`` (when present) and return settings from the environment."""

    if dotenv:
        load_dotenv()
    return Settings.from_env()


def _read_float(env, key: str, default: float) -> float:
    raw = env.get(key)
    if raw in (None, ""):
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{key} must not be negative")
    return value


def _read_int(env, key: str, default: int) -> int:
    raw = env.get(key)
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{key} must be at least 1")
    return value


def _read_level(env, key: str, default: str) -> str:
    raw = env.get(key)
    if raw in (None, ""):
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{key} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level
