"""Exceptions raised while talking to bank upstreams."""

from __future__ import annotations


class UpstreamHTTPError(RuntimeError):
    """An upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Upstream error {status_code}")


class NoTimeRecordsError(UpstreamHTTPError):
    """BIDV published no time records for the requested day."""

    def __init__(self, message: str = "No time records found") -> None:
        super().__init__(404, message)


class FetchExhaustedError(RuntimeError):
    """Every proxy relay failed on every retry round."""


__all__ = ["UpstreamHTTPError", "NoTimeRecordsError", "FetchExhaustedError"]
