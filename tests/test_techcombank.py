from __future__ import annotations

from datetime import date

import pytest

from conftest import USD_50_100, FakeResponse, FakeSession, techcombank_payload
from vnbank_fx.ingestion.errors import UpstreamHTTPError
from vnbank_fx.ingestion.models import NOT_AVAILABLE, Bank
from vnbank_fx.ingestion.techcombank import (
    TechcombankClient,
    parse_techcombank_rate,
    techcombank_url,
)


def test_techcombank_url_interpolates_iso_date() -> None:
    assert techcombank_url(date(2024, 1, 2)).endswith(
        "/ty-gia/_jcr_content.exchange-rates.2024-01-02.integration.json"
    )
    assert techcombank_url("2024-01-02").startswith("https://techcombank.com/content/techcombank/")


def test_parse_maps_matching_label() -> None:
    payload = techcombank_payload({"label": "EUR", "askRate": "28,000"}, USD_50_100)

    row = parse_techcombank_rate(payload, date(2024, 1, 2), "USD (50,100)")

    assert row is not None
    assert row.bank is Bank.TECHCOMBANK
    assert row.values() == (
        "2024-01-02",
        "Techcombank",
        "USD (50,100)",
        "25,450",
        "25,120",
        "25,100",
        "25,460",
        "2024-01-02T08:30:00",
    )


def test_parse_missing_fields_become_not_available() -> None:
    payload = techcombank_payload({"label": "JPY", "askRate": "170.5", "bidRateTM": ""})

    row = parse_techcombank_rate(payload, date(2024, 1, 2), "JPY")

    assert row is not None
    assert row.ask_rate == "170.5"
    assert row.bid_rate_ck == NOT_AVAILABLE
    assert row.bid_rate_tm == NOT_AVAILABLE
    assert row.ask_rate_tm == NOT_AVAILABLE
    assert row.input_date == NOT_AVAILABLE


@pytest.mark.parametrize(
    "payload",
    [
        techcombank_payload({"label": "EUR", "askRate": "28,000"}),
        techcombank_payload(),
        {"exchangeRate": None},
        {},
        [],
    ],
)
def test_parse_without_requested_label_yields_no_row(payload) -> None:
    assert parse_techcombank_rate(payload, date(2024, 1, 2), "USD (50,100)") is None


def test_fetch_payload_raises_upstream_status() -> None:
    client = TechcombankClient(session=FakeSession(lambda url: FakeResponse(503)))

    with pytest.raises(UpstreamHTTPError) as excinfo:
        client.fetch_payload(date(2024, 1, 2))

    assert excinfo.value.status_code == 503


def test_fetch_rate_uses_direct_get() -> None:
    session = FakeSession(lambda url: FakeResponse(200, techcombank_payload(USD_50_100)))
    client = TechcombankClient(session=session, timeout=5)

    row = client.fetch_rate(date(2024, 1, 2), "USD (50,100)")

    assert row is not None and row.ask_rate == "25,450"
    assert session.calls == [{"url": techcombank_url(date(2024, 1, 2)), "timeout": 5}]


@pytest.mark.parametrize("status", [404, 500])
def test_fetch_rate_treats_upstream_errors_as_no_row(status: int) -> None:
    client = TechcombankClient(session=FakeSession(lambda url: FakeResponse(status)))

    assert client.fetch_rate(date(2024, 1, 2), "USD (50,100)") is None


def test_fetch_rate_treats_network_and_json_errors_as_no_row(connection_error) -> None:
    offline = TechcombankClient(session=FakeSession(lambda url: connection_error))
    garbled = TechcombankClient(session=FakeSession(lambda url: FakeResponse(200, None, "<html>")))

    assert offline.fetch_rate(date(2024, 1, 2), "EUR") is None
    assert garbled.fetch_rate(date(2024, 1, 2), "EUR") is None
