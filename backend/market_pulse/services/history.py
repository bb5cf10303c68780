"""Calendar-keyed store of daily sentiment snapshots.

Two paths write into the store:

* the live path (``record_live``) refreshes today's snapshot on every
  successful collection and always overwrites;
* the backfill path (``backfill_if_missing``) fills historical dates from a
  secondary source and never replaces an entry that is already known.

A date missing from the store is read back as a closed-market day. The store
lives as long as its owner; it can be reset at any time and callers must
tolerate repopulating it from cold.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterator, List, Optional, Union
from zoneinfo import ZoneInfo

from market_pulse.models import DaySnapshot, SignalSet
from market_pulse.scoring.composite import compute_composite, round_half_up

logger = logging.getLogger(__name__)

DATE_KEY_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date]
SnapshotHook = Callable[[DaySnapshot], None]


class InvalidDateKeyError(ValueError):
    """Raised when a date key is not in canonical ``YYYY-MM-DD`` form."""


def parse_date_key(value: DateLike) -> date:
    """Parse a canonical date key, rejecting anything else."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = datetime.strptime(str(value), DATE_KEY_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateKeyError(f"Invalid date key {value!r}; expected YYYY-MM-DD") from exc
    if parsed.isoformat() != value:
        raise InvalidDateKeyError(f"Invalid date key {value!r}; expected YYYY-MM-DD")
    return parsed


def to_date_key(value: DateLike) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day in ``[start, end]``; nothing when ``start > end``.

    Never steps past ``end``, so ``date.max`` is a valid bound.
    """

    first = parse_date_key(start)
    last = parse_date_key(end)
    for offset in range((last - first).days + 1):
        yield first + timedelta(days=offset)


def today_key(timezone: str) -> str:
    """Return today's date key in the trading-calendar timezone."""

    return datetime.now(ZoneInfo(timezone)).date().isoformat()


def _round_optional(value: Optional[float], digits: int) -> Optional[float]:
    if value is None:
        return None
    return round_half_up(float(value), digits)


def build_snapshot(date_key: str, inputs: SignalSet) -> DaySnapshot:
    """Score ``inputs`` into an open-market snapshot with storage rounding."""

    return DaySnapshot(
        date=date_key,
        composite=compute_composite(inputs),
        sentiment=inputs.sentiment,
        volatility=_round_optional(inputs.volatility, 1),
        rate_change_pct=_round_optional(inputs.rate_change_pct, 2),
        dollar_change_pct=_round_optional(inputs.dollar_change_pct, 2),
        market_open=True,
    )


class SnapshotStore:
    """In-memory mapping of date key to :class:`DaySnapshot`.

    Not internally synchronized: callers that share one store between
    concurrent writers must serialize ``record_live`` and
    ``backfill_if_missing`` themselves.

    ``on_write`` is called with every snapshot actually written, which lets a
    caller mirror the store into durable storage.
    """

    def __init__(self, on_write: SnapshotHook | None = None) -> None:
        self._entries: Dict[str, DaySnapshot] = {}
        self._on_write = on_write

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, date_key: object) -> bool:
        if isinstance(date_key, date):
            date_key = to_date_key(date_key)
        return date_key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def get(self, date_key: DateLike) -> Optional[DaySnapshot]:
        return self._entries.get(to_date_key(date_key))

    def snapshots(self) -> List[DaySnapshot]:
        """Return a copy of all stored snapshots in ascending date order."""

        return [self._entries[key] for key in sorted(self._entries)]

    def reset(self) -> None:
        logger.info("Resetting snapshot store (%d entries dropped)", len(self._entries))
        self._entries.clear()

    def record_live(self, date_key: DateLike, inputs: SignalSet) -> DaySnapshot:
        """Score ``inputs`` and overwrite whatever is stored for ``date_key``."""

        key = to_date_key(date_key)
        snapshot = build_snapshot(key, inputs)
        previous = self._entries.get(key)
        self._write(snapshot)
        logger.debug(
            "Recorded live snapshot %s composite=%d (replaced=%s)",
            key,
            snapshot.composite,
            previous is not None,
        )
        return snapshot

    def backfill_if_missing(self, date_key: DateLike, snapshot: DaySnapshot) -> bool:
        """Insert ``snapshot`` unless ``date_key`` is already present.

        Returns ``True`` when the snapshot was inserted.
        """

        key = to_date_key(date_key)
        if key in self._entries:
            return False
        if snapshot.date != key:
            snapshot = replace(snapshot, date=key)
        self._write(snapshot)
        return True

    def get_range(self, start: DateLike, end: DateLike) -> List[DaySnapshot]:
        """Return one snapshot per calendar day in ``[start, end]``, ascending.

        Days with no stored entry come back as closed-market placeholders.
        """

        days: List[DaySnapshot] = []
        for day in iter_days(start, end):
            key = day.isoformat()
            days.append(self._entries.get(key) or DaySnapshot.closed(key))
        return days

    def _write(self, snapshot: DaySnapshot) -> None:
        self._entries[snapshot.date] = snapshot
        if self._on_write is not None:
            self._on_write(snapshot)


__all__ = [
    "DATE_KEY_FORMAT",
    "InvalidDateKeyError",
    "SnapshotStore",
    "build_snapshot",
    "iter_days",
    "parse_date_key",
    "to_date_key",
    "today_key",
]
