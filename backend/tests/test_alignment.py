"""Period return and change-percent tests."""

from __future__ import annotations

import pytest

from market_pulse.models import PricePoint
from market_pulse.services.alignment import (
    SECONDS_PER_DAY,
    change_percent_series,
    latest_change_percent,
    nearest_index,
    nearest_return,
    period_returns,
    sparkline,
)

DAY = SECONDS_PER_DAY


def test_nearest_return_matches_lookback_point():
    series = [PricePoint(0, 100.0), PricePoint(DAY * 30, 110.0)]
    result = nearest_return(series, 30)
    assert result is not None
    assert result.price == 100.0
    assert result.change_percent == pytest.approx(10.0)


def test_nearest_return_uses_last_point_as_now():
    series = [PricePoint(DAY * 1000 + i * DAY * 7, 50.0 + i) for i in range(10)]
    result = nearest_return(series, 28)
    # last point is index 9, four weeks earlier is index 5
    assert result.price == 55.0
    assert result.change_percent == pytest.approx((59.0 - 55.0) / 55.0 * 100)


def test_nearest_return_tie_prefers_earlier_index():
    series = [PricePoint(0, 100.0), PricePoint(DAY * 2, 200.0), PricePoint(DAY * 4, 300.0)]
    assert nearest_index(series, DAY) == 0
    result = nearest_return(series, 3)
    assert result.price == 100.0
    assert result.change_percent == pytest.approx(200.0)


def test_nearest_return_absent_for_zero_or_missing_price():
    zero = [PricePoint(0, 0.0), PricePoint(DAY * 15, 90.0), PricePoint(DAY * 30, 110.0)]
    missing = [PricePoint(0, None), PricePoint(DAY * 15, 90.0), PricePoint(DAY * 30, 110.0)]
    assert nearest_return(zero, 30) is None
    assert nearest_return(missing, 30) is None
    assert nearest_return(zero, 15) is not None


def test_nearest_return_absent_for_empty_series_or_missing_latest():
    assert nearest_return([], 30) is None
    assert nearest_return([PricePoint(0, 100.0), PricePoint(DAY * 30, None)], 30) is None


def test_period_returns_cover_standard_windows():
    series = [PricePoint(i * DAY * 7, 100.0 + i) for i in range(53)]
    returns = period_returns(series)
    assert list(returns) == ["1M", "3M", "6M", "1Y"]
    assert all(value is not None for value in returns.values())
    assert returns["1Y"].price == 100.0


def test_change_percent_series():
    changes = change_percent_series([100, 110, 99])
    assert changes[0] is None
    assert changes[1] == pytest.approx(10.0)
    assert changes[2] == pytest.approx(-10.0)


def test_change_percent_series_after_falsy_price():
    assert change_percent_series([0, 5, 10]) == [None, None, pytest.approx(100.0)]
    assert change_percent_series([100, None, 50]) == [None, None, None]
    assert change_percent_series([]) == []


def test_latest_change_percent():
    series = [PricePoint(0, 4.0), PricePoint(DAY, 4.2)]
    assert latest_change_percent(series) == pytest.approx(5.0)
    assert latest_change_percent(series[:1]) is None
    assert latest_change_percent([]) is None


def test_sparkline_keeps_last_points_without_gaps():
    prices = [float(i) for i in range(40)]
    prices[-3] = None
    line = sparkline(prices, 26)
    assert len(line) == 25
    assert line[0] == 14.0
    assert line[-1] == 39.0
