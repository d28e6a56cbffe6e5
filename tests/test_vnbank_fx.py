from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

import vnbank_fx
from vnbank_fx import VnBankFx
from vnbank_fx.config import Settings, load_settings
from vnbank_fx.ingestion.models import Bank, ExchangeRateRow


class _StubAdapter:
    def __init__(self, bank: Bank) -> None:
        self.bank = bank
        self.calls: list[tuple[date, str]] = []

    def fetch_rate(self, rate_date: date, currency: str):
        self.calls.append((rate_date, currency))
        return ExchangeRateRow(rate_date=rate_date, bank=self.bank, currency=currency, ask_rate="1")


def _fx(tmp_path: Path) -> VnBankFx:
    return VnBankFx(Settings(request_delay_seconds=0, output_dir=tmp_path))


def test_version_exposed() -> None:
    assert isinstance(vnbank_fx.__version__, str)
    assert VnBankFx.__version__ == vnbank_fx.__version__


def test_switching_bank_resets_currency(tmp_path: Path) -> None:
    fx = _fx(tmp_path)
    assert fx.bank is Bank.TECHCOMBANK
    assert fx.currency == "USD (50,100)"

    fx.currency = "EUR"
    fx.bank = "bidv"

    assert fx.currency == "USD"
    assert fx.currencies()[-1].value == "XAU"
    with pytest.raises(ValueError):
        fx.currency = "USD (1,2)"


def test_fetch_and_export(tmp_path: Path) -> None:
    fx = _fx(tmp_path)
    adapter = _StubAdapter(Bank.TECHCOMBANK)
    fx.use_adapter(adapter)

    result = fx.fetch("2024-01-01", date(2024, 1, 2))
    csv_path = fx.export("csv")
    xlsx_path = fx.export("xlsx", output_dir=tmp_path / "xlsx")

    assert len(result.rows) == 2
    assert adapter.calls == [(date(2024, 1, 1), "USD (50,100)"), (date(2024, 1, 2), "USD (50,100)")]
    assert csv_path.parent == tmp_path
    assert len(csv_path.read_text(encoding="utf-8").splitlines()) == 3
    assert xlsx_path.name.endswith("_2024-01-01_to_2024-01-02.xlsx")


def test_export_requires_rows(tmp_path: Path) -> None:
    fx = _fx(tmp_path)
    with pytest.raises(ValueError):
        fx.export()


def test_settings_from_env(tmp_path: Path) -> None:
    settings = Settings.from_env(
        {
            "VNBANK_FX_REQUEST_DELAY": "0.5",
            "VNBANK_FX_PROXY_RETRIES": "3",
            "VNBANK_FX_OUTPUT_DIR": str(tmp_path),
            "VNBANK_FX_LOG_LEVEL": "debug",
        }
    )

    assert settings.request_delay_seconds == 0.5
    assert settings.proxy_retries == 3
    assert settings.proxy_backoff_seconds == 0.4
    assert settings.timeout == 30
    assert settings.output_dir == tmp_path
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"VNBANK_FX_REQUEST_DELAY": "fast"},
        {"VNBANK_FX_REQUEST_DELAY": "-1"},
        {"VNBANK_FX_PROXY_RETRIES": "0"},
        {"VNBANK_FX_TIMEOUT": "1.5"},
        {"VNBANK_FX_LOG_LEVEL": "verbose"},
    ],
)
def test_settings_reject_invalid_values(env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        Settings.from_env(env)


def test_load_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("VNBANK_FX_TIMEOUT", "12")

    assert load_settings(dotenv=False).timeout == 12


def test_unknown_log_level_names_the_variable() -> None:
    with pytest.raises(ValueError, match="VNBANK_FX_LOG_LEVEL"):
        Settings.from_env({"VNBANK_FX_LOG_LEVEL": "verbose"})


def test_get_logger_ignores_log_level_environment(monkeypatch) -> None:
    from vnbank_fx.utils import logger

    monkeypatch.setenv("VNBANK_FX_LOG_LEVEL", "verbose")
    monkeypatch.setattr(logger, "_LOGGER", None)

    assert logger.get_logger("vnbank_fx.tests").name == "vnbank_fx.tests"
