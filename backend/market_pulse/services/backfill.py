"""Historical backfill assembly.

Turns raw historical series (sentiment index points plus daily closes of the
volatility index, the long-rate and the dollar index) into one snapshot per
calendar day, then merges the open-market days into a :class:`SnapshotStore`
without disturbing entries written by the live path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd
from opentelemetry import trace

from market_pulse.models import DaySnapshot, PricePoint, SignalSet
from market_pulse.scoring.composite import round_half_up
from market_pulse.services.alignment import change_percent_series
from market_pulse.services.history import DateLike, SnapshotStore, build_snapshot, iter_days

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

SentimentPoint = Tuple[float, float]


@dataclass
class BackfillResult:
    inserted: int = 0
    skipped: int = 0
    closed: int = 0


def market_date(timestamp: float, timezone: str) -> str:
    """Calendar day (``YYYY-MM-DD``) of an epoch-seconds timestamp in ``timezone``."""

    stamp = pd.Timestamp(timestamp, unit="s", tz="UTC").tz_convert(timezone)
    return stamp.strftime("%Y-%m-%d")


def _market_dates(timestamps: Sequence[float], timezone: str, unit: str = "s") -> List[str]:
    if not timestamps:
        return []
    index = pd.to_datetime(list(timestamps), unit=unit, utc=True).tz_convert(timezone)
    return list(index.strftime("%Y-%m-%d"))


def history_window(today: date, months: int = 3) -> Tuple[date, date]:
    """First day of the month ``months`` months before ``today``, through ``today``.

    The start is clamped to ``date.min`` for windows reaching before year 1.
    """

    month_index = today.year * 12 + (today.month - 1) - months
    if month_index < 12:
        return date.min, today
    start = date(month_index // 12, month_index % 12 + 1, 1)
    return start, today


def _closes_by_date(series: Sequence[PricePoint], timezone: str) -> Tuple[List[str], List[float]]:
    clean = [point for point in series if point.price is not None]
    dates = _market_dates([point.timestamp for point in clean], timezone)
    return dates, [float(point.price) for point in clean]  # type: ignore[arg-type]


def _change_by_date(series: Sequence[PricePoint], timezone: str) -> Dict[str, float]:
    dates, closes = _closes_by_date(series, timezone)
    changes = change_percent_series(closes)
    return {day: change for day, change in zip(dates, changes) if change is not None}


def sentiment_by_date(points: Iterable[SentimentPoint], timezone: str) -> Dict[str, int]:
    """Map sentiment index points (epoch milliseconds, value) to whole scores per day."""

    points = list(points)
    dates = _market_dates([ts for ts, _ in points], timezone, unit="ms")
    return {day: int(round_half_up(value)) for day, (_, value) in zip(dates, points)}


def assemble_history(
    sentiment_points: Iterable[SentimentPoint],
    volatility: Sequence[PricePoint],
    rate: Sequence[PricePoint],
    dollar: Sequence[PricePoint],
    start: DateLike,
    end: DateLike,
    timezone: str,
) -> List[DaySnapshot]:
    """Build one snapshot per day in ``[start, end]``.

    Days on which the volatility index printed a close are treated as open
    market days; every other day becomes a closed-market placeholder.
    """

    sentiment_map = sentiment_by_date(sentiment_points, timezone)
    vol_dates, vol_closes = _closes_by_date(volatility, timezone)
    volatility_map = dict(zip(vol_dates, vol_closes))
    rate_map = _change_by_date(rate, timezone)
    dollar_map = _change_by_date(dollar, timezone)
    open_days = set(vol_dates)

    days: List[DaySnapshot] = []
    for day in iter_days(start, end):
        key = day.isoformat()
        if key not in open_days:
            days.append(DaySnapshot.closed(key))
            continue
        inputs = SignalSet(
            sentiment=sentiment_map.get(key),
            volatility=volatility_map.get(key),
            rate_change_pct=rate_map.get(key),
            dollar_change_pct=dollar_map.get(key),
        )
        days.append(build_snapshot(key, inputs))
    return days


def backfill_store(store: SnapshotStore, days: Iterable[DaySnapshot]) -> BackfillResult:
    """Merge assembled days into ``store``; closed days are not stored."""

    result = BackfillResult()
    with tracer.start_as_current_span("market_pulse.backfill") as span:
        for day in days:
            if not day.market_open:
                result.closed += 1
                continue
            if store.backfill_if_missing(day.date, day):
                result.inserted += 1
            else:
                result.skipped += 1
        span.set_attribute("backfill.inserted", result.inserted)
        span.set_attribute("backfill.skipped", result.skipped)
        span.set_attribute("backfill.closed", result.closed)
    logger.info(
        "Backfill merged %d snapshots (%d already present, %d closed days)",
        result.inserted,
        result.skipped,
        result.closed,
    )
    return result


__all__ = [
    "BackfillResult",
    "assemble_history",
    "backfill_store",
    "history_window",
    "market_date",
    "sentiment_by_date",
]
