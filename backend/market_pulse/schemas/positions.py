"""Schemas for trade-ledger position summaries."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

from market_pulse.models import Trade


class TradeSchema(BaseModel):
    id: str
    type: Literal["buy", "sell"]
    date: dt.date
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity: float = Field(..., gt=0, allow_inf_nan=False)

    def to_trade(self) -> Trade:
        return Trade(id=self.id, type=self.type, date=self.date, price=self.price, quantity=self.quantity)


class PositionRequest(BaseModel):
    symbol: str = Field(..., examples=["NVDA"])
    trades: list[TradeSchema]

    model_config = {
        "json_schema_extra": {
            "example": {
                "symbol": "NVDA",
                "trades": [
                    {"id": "t1", "type": "buy", "date": "2025-01-06", "price": 100.0, "quantity": 10},
                    {"id": "t2", "type": "sell", "date": "2025-02-03", "price": 120.0, "quantity": 4},
                ],
            }
        }
    }


class PositionResponse(BaseModel):
    symbol: str
    avg_cost: float
    total_qty: float
    realized_pl: float
    invested_amount: float
    trade_count: int
    notes: list[str]


__all__ = ["PositionRequest", "PositionResponse", "TradeSchema"]
