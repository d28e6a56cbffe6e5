"""FastAPI dependency providers; tests swap them via ``app.dependency_overrides``.

Client providers open one ``requests.Session`` per request and close it once
the response has been sent.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterator

import requests

from vnbank_fx.config import Settings, load_settings
from vnbank_fx.ingestion.bidv import BIDVClient
from vnbank_fx.ingestion.models import Bank
from vnbank_fx.ingestion.proxy import ProxyFetcher
from vnbank_fx.ingestion.strategy import RateAdapter, build_adapter
from vnbank_fx.ingestion.techcombank import TechcombankClient

AdapterFactory = Callable[[Bank], RateAdapter]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_techcombank_client() -> Iterator[TechcombankClient]:
    settings = get_settings()
    session = requests.Session()
    try:
        yield TechcombankClient(session=session, timeout=settings.timeout)
    finally:
        session.close()


def get_bidv_client() -> Iterator[BIDVClient]:
    settings = get_settings()
    session = requests.Session()
    proxy = ProxyFetcher(
        session=session,
        tries=settings.proxy_retries,
        backoff_seconds=settings.proxy_backoff_seconds,
        timeout=settings.timeout,
    )
    try:
        yield BIDVClient(proxy=proxy)
    finally:
        session.close()


def get_adapter_factory() -> Iterator[AdapterFactory]:
    settings = get_settings()
    session = requests.Session()
    try:
        yield lambda bank: build_adapter(bank, session=session, settings=settings)
    finally:
        session.close()


def get_request_delay() -> float:
    return get_settings().request_delay_seconds
