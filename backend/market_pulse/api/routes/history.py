"""Daily snapshot history routes."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from market_pulse.api.dependencies.store import get_snapshot_store
from market_pulse.config import get_settings
from market_pulse.schemas import (
    BackfillRequest,
    BackfillResponse,
    DaySnapshotSchema,
    HistoryResponse,
    LiveSnapshotRequest,
)
from market_pulse.services.backfill import assemble_history, backfill_store, history_window
from market_pulse.services.history import InvalidDateKeyError, SnapshotStore, parse_date_key, today_key

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_or_422(value: str) -> date:
    try:
        return parse_date_key(value)
    except InvalidDateKeyError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _resolve_window(start: Optional[str], end: Optional[str]) -> tuple[date, date]:
    settings = get_settings()
    end_day = _parse_or_422(end) if end else parse_date_key(today_key(settings.timezone))
    start_day = _parse_or_422(start) if start else history_window(end_day, settings.history_months)[0]
    if start_day > end_day:
        raise HTTPException(
            status_code=422,
            detail=f"from ({start_day.isoformat()}) is after to ({end_day.isoformat()})",
        )
    span_days = (end_day - start_day).days + 1
    if span_days > settings.max_history_days:
        raise HTTPException(
            status_code=422,
            detail=f"Window spans {span_days} days; at most {settings.max_history_days} allowed",
        )
    return start_day, end_day


@router.get("", response_model=HistoryResponse)
async def get_history(
    from_date: Optional[str] = Query(default=None, alias="from"),
    to_date: Optional[str] = Query(default=None, alias="to"),
    store: SnapshotStore = Depends(get_snapshot_store),
) -> HistoryResponse:
    start_day, end_day = _resolve_window(from_date, to_date)
    days = store.get_range(start_day, end_day)
    return HistoryResponse(
        start=start_day.isoformat(),
        end=end_day.isoformat(),
        days=[DaySnapshotSchema.from_snapshot(day) for day in days],
        stored=len(store),
        updated_at=datetime.now(timezone.utc),
    )


@router.post("/live", response_model=DaySnapshotSchema)
async def record_live_snapshot(
    payload: LiveSnapshotRequest,
    store: SnapshotStore = Depends(get_snapshot_store),
) -> DaySnapshotSchema:
    """Score today's signals and overwrite the stored snapshot for that day."""

    date_key = payload.date or today_key(get_settings().timezone)
    _parse_or_422(date_key)
    snapshot = store.record_live(date_key, payload.to_signals())
    logger.info("Live snapshot recorded for %s (composite=%d)", date_key, snapshot.composite)
    return DaySnapshotSchema.from_snapshot(snapshot)


@router.post("/backfill", response_model=BackfillResponse)
async def backfill_history(
    payload: BackfillRequest,
    store: SnapshotStore = Depends(get_snapshot_store),
) -> BackfillResponse:
    """Assemble historical series into snapshots and fill the dates not yet known."""

    start_day, end_day = _resolve_window(payload.start, payload.end)
    days = assemble_history(
        sentiment_points=[(point.x, point.y) for point in payload.sentiment],
        volatility=[point.to_point() for point in payload.volatility],
        rate=[point.to_point() for point in payload.rate],
        dollar=[point.to_point() for point in payload.dollar],
        start=start_day,
        end=end_day,
        timezone=get_settings().timezone,
    )
    result = backfill_store(store, days)
    return BackfillResponse(
        start=start_day.isoformat(),
        end=end_day.isoformat(),
        inserted=result.inserted,
        skipped=result.skipped,
        closed=result.closed,
        stored=len(store),
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def reset_history(store: SnapshotStore = Depends(get_snapshot_store)) -> Response:
    store.reset()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{date_key}", response_model=DaySnapshotSchema)
async def get_day(date_key: str, store: SnapshotStore = Depends(get_snapshot_store)) -> DaySnapshotSchema:
    _parse_or_422(date_key)
    snapshot = store.get(date_key)
    if snapshot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No snapshot stored for {date_key}")
    return DaySnapshotSchema.from_snapshot(snapshot)


__all__ = ["backfill_history", "get_day", "get_history", "record_live_snapshot", "reset_history"]
