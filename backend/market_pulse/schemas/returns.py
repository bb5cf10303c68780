"""Schemas for period returns over a price series."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from market_pulse.schemas.history import PricePointSchema


class ReturnsRequest(BaseModel):
    symbol: Optional[str] = Field(default=None, examples=["AAPL"])
    series: list[PricePointSchema]


class PeriodReturnSchema(BaseModel):
    price: float
    change_percent: float


class ReturnsResponse(BaseModel):
    symbol: Optional[str] = None
    periods: dict[str, Optional[PeriodReturnSchema]]
    sparkline: list[float]
    latest_change_percent: Optional[float] = None


__all__ = ["PeriodReturnSchema", "ReturnsRequest", "ReturnsResponse"]
