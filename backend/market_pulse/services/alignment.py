"""Period-return and change-percent helpers over price series.

All functions take the series as given and use its last point as "now", so
results are reproducible for replayed data.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from market_pulse.models import PeriodReturn, PricePoint

SECONDS_PER_DAY = 86400

PERIOD_WINDOWS: Dict[str, int] = {
    "1M": 30,
    "3M": 90,
    "6M": 180,
    "1Y": 365,
}


def nearest_index(series: Sequence[PricePoint], target: float) -> int:
    """Index of the point closest to ``target``; the earliest index wins ties."""

    best_idx = -1
    best_diff = float("inf")
    for idx, point in enumerate(series):
        diff = abs(point.timestamp - target)
        if diff < best_diff:
            best_diff = diff
            best_idx = idx
    return best_idx


def nearest_return(series: Sequence[PricePoint], lookback_days: int) -> Optional[PeriodReturn]:
    """Percent change from the point nearest ``lookback_days`` ago to the last point.

    Returns ``None`` for an empty series, a missing latest price, or when the
    matched past price is missing or zero.
    """

    if not series:
        return None
    latest = series[-1]
    if latest.price is None:
        return None

    target = latest.timestamp - lookback_days * SECONDS_PER_DAY
    idx = nearest_index(series, target)
    past_price = series[idx].price
    if past_price is None or past_price == 0:
        return None
    return PeriodReturn(
        price=past_price,
        change_percent=(latest.price - past_price) / past_price * 100,
    )


def period_returns(series: Sequence[PricePoint]) -> Dict[str, Optional[PeriodReturn]]:
    return {key: nearest_return(series, days) for key, days in PERIOD_WINDOWS.items()}


def change_percent_series(prices: Sequence[Optional[float]]) -> List[Optional[float]]:
    """Day-over-day percent change; index 0 and points after a falsy price are ``None``."""

    changes: List[Optional[float]] = []
    for idx, price in enumerate(prices):
        if idx == 0:
            changes.append(None)
            continue
        prev = prices[idx - 1]
        if not prev or price is None:
            changes.append(None)
            continue
        changes.append((price - prev) / prev * 100)
    return changes


def latest_change_percent(series: Sequence[PricePoint]) -> Optional[float]:
    """Change percent of the last point versus the one before it."""

    changes = change_percent_series([point.price for point in series])
    return changes[-1] if changes else None


def sparkline(prices: Sequence[Optional[float]], points: int = 26) -> List[float]:
    """Last ``points`` prices with gaps removed."""

    return [price for price in list(prices)[-points:] if price is not None]


__all__ = [
    "PERIOD_WINDOWS",
    "SECONDS_PER_DAY",
    "change_percent_series",
    "latest_change_percent",
    "nearest_index",
    "nearest_return",
    "period_returns",
    "sparkline",
]
