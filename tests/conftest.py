from __future__ import annotations

import json
from typing import Any, Callable

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Replays responses chosen by ``handler(url)`` and records every call."""

    def __init__(self, handler: Callable[[str], FakeResponse]) -> None:
        self.handler = handler
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        result = self.handler(url)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


def techcombank_payload(*entries: dict[str, Any]) -> dict[str, Any]:
    return {"exchangeRate": {"data": list(entries)}}


USD_50_100 = {
    "label": "USD (50,100)",
    "askRate": "25,450",
    "bidRateCK": "25,120",
    "bidRateTM": "25,100",
    "askRateTM": "25,460",
    "inputDate": "2024-01-02T08:30:00",
}
