"""Composite market-sentiment scoring and daily snapshot history."""

from .models import DaySnapshot, PeriodReturn, PricePoint, SignalSet, Trade
from .scoring.composite import compute_composite
from .services.alignment import change_percent_series, nearest_return
from .services.history import SnapshotStore

__all__ = [
    "DaySnapshot",
    "PeriodReturn",
    "PricePoint",
    "SignalSet",
    "SnapshotStore",
    "Trade",
    "change_percent_series",
    "compute_composite",
    "nearest_return",
]
