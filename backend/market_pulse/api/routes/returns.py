"""Period return routes."""

from __future__ import annotations

from fastapi import APIRouter

from market_pulse.config import get_settings
from market_pulse.schemas import PeriodReturnSchema, ReturnsRequest, ReturnsResponse
from market_pulse.services.alignment import latest_change_percent, period_returns, sparkline

router = APIRouter()


@router.post("", response_model=ReturnsResponse)
async def compute_returns(payload: ReturnsRequest) -> ReturnsResponse:
    """Return 1M/3M/6M/1Y returns and a sparkline for a price series."""

    series = [point.to_point() for point in payload.series]
    periods = {
        key: PeriodReturnSchema(price=value.price, change_percent=value.change_percent) if value else None
        for key, value in period_returns(series).items()
    }
    return ReturnsResponse(
        symbol=payload.symbol,
        periods=periods,
        sparkline=sparkline([point.price for point in series], get_settings().sparkline_points),
        latest_change_percent=latest_change_percent(series),
    )


__all__ = ["compute_returns"]
