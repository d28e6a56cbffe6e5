"""Relay GET requests through public CORS proxies for upstreams that block direct access."""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence
from urllib.parse import quote

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from vnbank_fx.ingestion.errors import FetchExhaustedError
from vnbank_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/125 Safari/537.36"
    ),
    "Accept": "application/json, text/javascript, */*; q=0.01",
    "Referer": "https://bidv.com.vn/",
    "X-Requested-With": "XMLHttpRequest",
}

# Tried in order: a fast pass-through relay first, then a slower but more tolerant one.
PROXY_TEMPLATES: tuple[str, ...] = (
    "https://corsproxy.io/?{encoded}",
    "https://api.allorigins.win/raw?url={encoded}",
)


def encode_target(url: str) -> str:
    """Percent-encode ``url`` the way ``encodeURIComponent`` does."""

    return quote(url, safe="-_.!~*'()")


def proxied_urls(url: str, templates: Sequence[str] = PROXY_TEMPLATES) -> list[str]:
    encoded = encode_target(url)
    return [template.format(encoded=encoded) for template in templates]


class ProxyFetcher:
    """Fetch a target URL through an ordered list of proxy relays.

    Each retry round tries every relay once, in order, and returns the first
    response with a 2xx status. A round that fails completely is followed by a
    fixed back-off before the next one. When all rounds fail the call raises
    :class:`FetchExhaustedError`, so at most ``tries * len(templates)`` requests
    are issued.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        tries: int = 2,
        backoff_seconds: float = 0.4,
        timeout: int = 30,
        templates: Sequence[str] = PROXY_TEMPLATES,
        headers: Optional[dict[str, str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if tries < 1:
            raise ValueError("tries must be at least 1")
        self.session = session or requests.Session()
        self.tries = tries
        self.backoff_seconds = backoff_seconds
        self.timeout = timeout
        self.templates = tuple(templates)
        self.headers = dict(headers or BROWSER_HEADERS)
        self.sleep = sleep

    def get(self, url: str) -> requests.Response:
        """Return the first successful relayed response for ``url``."""

        retrying = Retrying(
            stop=stop_after_attempt(self.tries),
            wait=wait_fixed(self.backoff_seconds),
            retry=retry_if_exception_type(FetchExhaustedError),
            sleep=self.sleep,
            before_sleep=self._log_round_failure,
            reraise=True,
        )
        return retrying(self._try_relays, url)

    def _try_relays(self, url: str) -> requests.Response:
        for relay_url in proxied_urls(url, self.templates):
            try:
                response = self.session.get(relay_url, headers=self.headers, timeout=self.timeout)
            except requests.RequestException as exc:
                LOGGER.debug("Proxy request via %s failed: %s", relay_url, exc)
                continue
            if response.ok:
                return response
            LOGGER.debug("Proxy %s answered HTTP %s", relay_url, response.status_code)
        raise FetchExhaustedError(f"fetch failed for {url}")

    @staticmethod
    def _log_round_failure(retry_state) -> None:
        LOGGER.warning(
            "All proxies failed (round %s); backing off before retrying",
            retry_state.attempt_number,
        )


__all__ = ["BROWSER_HEADERS", "PROXY_TEMPLATES", "ProxyFetcher", "encode_target", "proxied_urls"]
