"""Schemas for the daily snapshot history."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from market_pulse.models import DaySnapshot, PricePoint
from market_pulse.schemas.composite import SignalSetSchema


class DaySnapshotSchema(BaseModel):
    date: str = Field(..., examples=["2025-03-14"])
    composite: int = Field(..., ge=0, le=100)
    sentiment: Optional[float] = None
    volatility: Optional[float] = None
    rate_change_pct: Optional[float] = None
    dollar_change_pct: Optional[float] = None
    market_open: bool

    @classmethod
    def from_snapshot(cls, snapshot: DaySnapshot) -> "DaySnapshotSchema":
        return cls(
            date=snapshot.date,
            composite=snapshot.composite,
            sentiment=snapshot.sentiment,
            volatility=snapshot.volatility,
            rate_change_pct=snapshot.rate_change_pct,
            dollar_change_pct=snapshot.dollar_change_pct,
            market_open=snapshot.market_open,
        )


class HistoryResponse(BaseModel):
    start: str
    end: str
    days: list[DaySnapshotSchema]
    stored: int
    updated_at: datetime


class LiveSnapshotRequest(SignalSetSchema):
    date: Optional[str] = Field(
        default=None,
        description="Date key (YYYY-MM-DD); defaults to today in the trading-calendar timezone.",
    )


class PricePointSchema(BaseModel):
    timestamp: int = Field(..., description="Epoch seconds")
    price: Optional[float] = Field(default=None, allow_inf_nan=False)

    def to_point(self) -> PricePoint:
        return PricePoint(timestamp=self.timestamp, price=self.price)


class SentimentPointSchema(BaseModel):
    x: float = Field(..., allow_inf_nan=False, description="Epoch milliseconds")
    y: float = Field(..., allow_inf_nan=False)


class BackfillRequest(BaseModel):
    sentiment: list[SentimentPointSchema] = Field(default_factory=list)
    volatility: list[PricePointSchema] = Field(default_factory=list)
    rate: list[PricePointSchema] = Field(default_factory=list)
    dollar: list[PricePointSchema] = Field(default_factory=list)
    start: Optional[str] = None
    end: Optional[str] = None


class BackfillResponse(BaseModel):
    start: str
    end: str
    inserted: int
    skipped: int
    closed: int
    stored: int


__all__ = [
    "BackfillRequest",
    "BackfillResponse",
    "DaySnapshotSchema",
    "HistoryResponse",
    "LiveSnapshotRequest",
    "PricePointSchema",
    "SentimentPointSchema",
]
