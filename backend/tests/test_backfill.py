"""Historical backfill assembly tests."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from market_pulse.models import PricePoint, SignalSet
from market_pulse.services import backfill
from market_pulse.services.backfill import (
    assemble_history,
    backfill_store,
    history_window,
    market_date,
    sentiment_by_date,
)
from market_pulse.services.history import SnapshotStore

NEW_YORK = "America/New_York"


def _close(day: int, hour: int = 20) -> int:
    """Epoch seconds for a March 2025 UTC timestamp."""

    return int(datetime(2025, 3, day, hour, tzinfo=timezone.utc).timestamp())


def _series(values: dict[int, float | None]) -> list[PricePoint]:
    return [PricePoint(_close(day), price) for day, price in values.items()]


def test_market_date_uses_trading_calendar_timezone():
    assert market_date(_close(14, 20), NEW_YORK) == "2025-03-14"
    # 02:00 UTC on the 15th is still the evening of the 14th in New York
    assert market_date(_close(15, 2), NEW_YORK) == "2025-03-14"
    assert market_date(_close(15, 2), "UTC") == "2025-03-15"


def test_history_window_starts_on_first_of_month():
    assert history_window(date(2025, 5, 31), 3) == (date(2025, 2, 1), date(2025, 5, 31))
    assert history_window(date(2025, 1, 15), 3) == (date(2024, 10, 1), date(2025, 1, 15))
    assert history_window(date(2025, 3, 10), 1) == (date(2025, 2, 1), date(2025, 3, 10))


def test_history_window_clamps_before_year_one():
    assert history_window(date(1, 2, 1), 3) == (date.min, date(1, 2, 1))
    assert history_window(date(1, 4, 20), 3) == (date(1, 1, 1), date(1, 4, 20))
    assert history_window(date(2, 2, 1), 3) == (date(1, 11, 1), date(2, 2, 1))


def test_sentiment_points_round_per_day():
    points = [(_close(10) * 1000, 40.4), (_close(11) * 1000, 55.6)]
    assert sentiment_by_date(points, NEW_YORK) == {"2025-03-10": 40, "2025-03-11": 56}


def _assembled():
    sentiment = [
        (_close(9) * 1000, 12.0),
        (_close(10) * 1000, 40.4),
        (_close(11) * 1000, 55.6),
    ]
    volatility = _series({10: 20.0, 11: 18.0})
    rate = _series({10: 4.0, 11: 4.1})
    dollar = _series({10: 100.0, 11: 99.0})
    return assemble_history(sentiment, volatility, rate, dollar, "2025-03-08", "2025-03-11", NEW_YORK)


def test_assemble_history_marks_open_days_from_volatility_closes():
    days = _assembled()
    assert [day.date for day in days] == ["2025-03-08", "2025-03-09", "2025-03-10", "2025-03-11"]
    assert [day.market_open for day in days] == [False, False, True, True]

    sunday = days[1]
    assert sunday.composite == 50
    assert sunday.sentiment is None


def test_assemble_history_scores_open_days():
    days = _assembled()
    monday, tuesday = days[2], days[3]

    # first close of each change series has no prior day
    assert monday.rate_change_pct is None
    assert monday.dollar_change_pct is None
    assert monday.sentiment == 40
    assert monday.volatility == 20.0
    assert monday.composite == 52

    assert tuesday.rate_change_pct == pytest.approx(2.5)
    assert tuesday.dollar_change_pct == pytest.approx(-1.0)
    assert tuesday.composite == 57


def test_assemble_history_drops_missing_closes():
    volatility = _series({10: 20.0, 11: None})
    days = assemble_history([], volatility, [], [], "2025-03-10", "2025-03-11", NEW_YORK)
    assert [day.market_open for day in days] == [True, False]


def test_assemble_history_empty_inputs():
    days = assemble_history([], [], [], [], "2025-03-10", "2025-03-12", NEW_YORK)
    assert len(days) == 3
    assert not any(day.market_open for day in days)
    assert assemble_history([], [], [], [], "2025-03-12", "2025-03-10", NEW_YORK) == []


def test_backfill_store_keeps_live_entries():
    store = SnapshotStore()
    live = store.record_live("2025-03-11", SignalSet(sentiment=90))

    result = backfill_store(store, _assembled())

    assert result.inserted == 1
    assert result.skipped == 1
    assert result.closed == 2
    assert store.get("2025-03-11") == live
    assert store.get("2025-03-10").composite == 52
    assert "2025-03-09" not in store


def test_backfill_store_is_idempotent():
    store = SnapshotStore()
    first = backfill_store(store, _assembled())
    second = backfill_store(store, _assembled())
    assert first.inserted == 2
    assert second.inserted == 0
    assert second.skipped == 2


def test_assemble_history_reaches_calendar_bounds():
    days = assemble_history([], [], [], [], "9999-12-30", "9999-12-31", NEW_YORK)
    assert [day.date for day in days] == ["9999-12-30", "9999-12-31"]
    assert not any(day.market_open for day in days)


def test_backfill_store_records_span(monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(backfill, "tracer", provider.get_tracer(__name__))

    backfill_store(SnapshotStore(), _assembled())

    (span,) = exporter.get_finished_spans()
    assert span.name == "market_pulse.backfill"
    assert span.attributes["backfill.inserted"] == 2
    assert span.attributes["backfill.closed"] == 2
