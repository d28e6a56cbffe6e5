"""
vnbank-fx: FastAPI application entry point.
Builds the app and registers routes; fetching logic lives in ``vnbank_fx.ingestion``.
"""

from __future__ import annotations

import os

from fastapi import FastAPI

from vnbank_fx.api.dependencies import get_settings
from vnbank_fx.api.routes import router as exchange_router
from vnbank_fx.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)


def create_app() -> FastAPI:
    set_level(get_settings().log_level)
    application = FastAPI(
        title="vnbank-fx",
        description="Daily Techcombank and BIDV exchange rates with CSV/XLSX export",
    )
    application.include_router(exchange_router)

    @application.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()


def main() -> None:
    import uvicorn

    host = os.getenv("VNBANK_FX_HOST", "127.0.0.1")
    port = int(os.getenv("VNBANK_FX_PORT", "8000"))
    LOGGER.info("Starting vnbank-fx API on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":  # pragma: no cover - server entry point
    main()
