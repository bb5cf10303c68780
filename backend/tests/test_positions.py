"""Average-cost position tests."""

from __future__ import annotations

from datetime import date

import pytest

from market_pulse.models import Trade
from market_pulse.services.positions import calc_position


def test_average_cost_and_realized_pl():
    trades = [
        Trade(id="t3", type="sell", date=date(2025, 3, 1), price=130.0, quantity=5),
        Trade(id="t1", type="buy", date=date(2025, 1, 6), price=100.0, quantity=10),
        Trade(id="t2", type="buy", date=date(2025, 2, 3), price=120.0, quantity=10),
    ]
    summary = calc_position(trades)

    assert summary.total_qty == pytest.approx(15)
    assert summary.avg_cost == pytest.approx(110.0)
    assert summary.realized_pl == pytest.approx(100.0)
    assert summary.invested_amount == pytest.approx(1650.0)
    assert summary.trade_count == 3
    assert summary.notes == []


def test_same_day_trades_order_by_id():
    trades = [
        Trade(id="b", type="sell", date=date(2025, 1, 6), price=12.0, quantity=1),
        Trade(id="a", type="buy", date=date(2025, 1, 6), price=10.0, quantity=1),
    ]
    summary = calc_position(trades)
    assert summary.realized_pl == pytest.approx(2.0)
    assert summary.total_qty == 0


def test_oversell_only_closes_open_quantity():
    trades = [
        Trade(id="t1", type="BUY", date=date(2025, 1, 6), price=10.0, quantity=2),
        Trade(id="t2", type="SELL", date=date(2025, 1, 7), price=20.0, quantity=5),
    ]
    summary = calc_position(trades)

    assert summary.realized_pl == pytest.approx(20.0)
    assert summary.total_qty == 0
    assert summary.avg_cost == 0.0
    assert summary.invested_amount == pytest.approx(0.0)
    assert len(summary.notes) == 1


def test_empty_ledger():
    summary = calc_position([])
    assert summary.avg_cost == 0.0
    assert summary.total_qty == 0.0
    assert summary.realized_pl == 0.0
