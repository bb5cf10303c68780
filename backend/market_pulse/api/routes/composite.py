"""Composite score route."""

from __future__ import annotations

from fastapi import APIRouter

from market_pulse.schemas import CompositeResponse, SignalScoreSchema, SignalSetSchema
from market_pulse.scoring import compute_composite, score_breakdown, sentiment_label, sentiment_level, volatility_level

router = APIRouter()


@router.post("", response_model=CompositeResponse)
async def score_signals(payload: SignalSetSchema) -> CompositeResponse:
    """Score a set of already-fetched market signals."""

    signals = payload.to_signals()
    composite = compute_composite(signals)
    level = sentiment_level(composite)
    return CompositeResponse(
        composite=composite,
        level=level.value,
        label=sentiment_label(level),
        volatility_level=volatility_level(signals.volatility).value if signals.volatility is not None else None,
        breakdown=[
            SignalScoreSchema(name=entry.name, raw=entry.raw, weight=entry.weight, score=entry.score)
            for entry in score_breakdown(signals)
        ],
    )


__all__ = ["score_signals"]
