"""Average-cost position summary over a trade ledger."""

from __future__ import annotations

from typing import Iterable

from market_pulse.models import PositionSummary, Trade


def calc_position(trades: Iterable[Trade]) -> PositionSummary:
    """Replay ``trades`` in date order using average-cost accounting.

    Sells larger than the open quantity only close what is held.
    """

    summary = PositionSummary()
    total_cost = 0.0

    for trade in sorted(trades, key=lambda t: (t.date, t.id)):
        summary.trade_count += 1
        if trade.normalized_type() == "buy":
            total_cost += trade.price * trade.quantity
            summary.total_qty += trade.quantity
            continue

        avg_cost = total_cost / summary.total_qty if summary.total_qty > 0 else 0.0
        sell_qty = min(trade.quantity, summary.total_qty)
        if sell_qty < trade.quantity:
            summary.notes.append(
                f"Sell {trade.id} on {trade.date.isoformat()} exceeds open quantity; closed {sell_qty:g}"
            )
        summary.realized_pl += (trade.price - avg_cost) * sell_qty
        total_cost -= avg_cost * sell_qty
        summary.total_qty -= sell_qty

    summary.avg_cost = total_cost / summary.total_qty if summary.total_qty > 0 else 0.0
    summary.invested_amount = total_cost
    return summary


__all__ = ["calc_position"]
