"""Position summary routes."""

from __future__ import annotations

from fastapi import APIRouter

from market_pulse.schemas import PositionRequest, PositionResponse
from market_pulse.services.positions import calc_position

router = APIRouter()


@router.post("/summary", response_model=PositionResponse)
async def summarize_position(payload: PositionRequest) -> PositionResponse:
    summary = calc_position(trade.to_trade() for trade in payload.trades)
    return PositionResponse(
        symbol=payload.symbol,
        avg_cost=summary.avg_cost,
        total_qty=summary.total_qty,
        realized_pl=summary.realized_pl,
        invested_amount=summary.invested_amount,
        trade_count=summary.trade_count,
        notes=summary.notes,
    )


__all__ = ["summarize_position"]
