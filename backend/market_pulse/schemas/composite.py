"""Schemas for composite score requests and responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from market_pulse.models import SignalSet


class SignalSetSchema(BaseModel):
    sentiment: Optional[float] = Field(default=None, allow_inf_nan=False, description="Fear/greed index, 0-100")
    volatility: Optional[float] = Field(default=None, allow_inf_nan=False, description="Volatility index close")
    rate_change_pct: Optional[float] = Field(default=None, allow_inf_nan=False, description="Long-rate daily change %")
    dollar_change_pct: Optional[float] = Field(default=None, allow_inf_nan=False, description="Dollar-index daily change %")

    model_config = {
        "json_schema_extra": {
            "example": {
                "sentiment": 62,
                "volatility": 17.4,
                "rate_change_pct": 0.85,
                "dollar_change_pct": -0.21,
            }
        }
    }

    def to_signals(self) -> SignalSet:
        return SignalSet(
            sentiment=self.sentiment,
            volatility=self.volatility,
            rate_change_pct=self.rate_change_pct,
            dollar_change_pct=self.dollar_change_pct,
        )


class SignalScoreSchema(BaseModel):
    name: str
    raw: float
    weight: int
    score: float


class CompositeResponse(BaseModel):
    composite: int = Field(..., ge=0, le=100)
    level: str
    label: str
    volatility_level: Optional[str] = None
    breakdown: list[SignalScoreSchema]


__all__ = ["SignalSetSchema", "SignalScoreSchema", "CompositeResponse"]
