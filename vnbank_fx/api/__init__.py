"""HTTP service exposing bank passthroughs, range collection and exports."""

from __future__ import annotations

from vnbank_fx.api.app import app, create_app

__all__ = ["app", "create_app"]
