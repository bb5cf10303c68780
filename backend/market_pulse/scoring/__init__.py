"""Composite sentiment scoring."""

from .composite import compute_composite, round_half_up, score_breakdown
from .levels import SentimentLevel, VolatilityLevel, sentiment_label, sentiment_level, volatility_level

__all__ = [
    "SentimentLevel",
    "VolatilityLevel",
    "compute_composite",
    "round_half_up",
    "score_breakdown",
    "sentiment_label",
    "sentiment_level",
    "volatility_level",
]
