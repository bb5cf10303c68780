"""Dependency helpers exposing the application-owned snapshot store."""

from __future__ import annotations

from fastapi import FastAPI, Request

from market_pulse.services.history import SnapshotStore


def attach_store(app: FastAPI, store: SnapshotStore | None = None) -> SnapshotStore:
    """Install ``store`` (or a fresh one) as the app's snapshot store."""

    app.state.snapshot_store = store if store is not None else SnapshotStore()
    return app.state.snapshot_store


def get_snapshot_store(request: Request) -> SnapshotStore:
    store = getattr(request.app.state, "snapshot_store", None)
    if store is None:
        store = attach_store(request.app)
    return store


__all__ = ["attach_store", "get_snapshot_store"]
