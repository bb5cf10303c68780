"""Sentiment and volatility level classification for display."""

from __future__ import annotations

from enum import Enum


class SentimentLevel(str, Enum):
    EXTREME_FEAR = "extreme-fear"
    FEAR = "fear"
    NEUTRAL = "neutral"
    GREED = "greed"
    EXTREME_GREED = "extreme-greed"


_SENTIMENT_LABELS = {
    SentimentLevel.EXTREME_FEAR: "Extreme Fear",
    SentimentLevel.FEAR: "Fear",
    SentimentLevel.NEUTRAL: "Neutral",
    SentimentLevel.GREED: "Greed",
    SentimentLevel.EXTREME_GREED: "Extreme Greed",
}


def sentiment_level(score: float) -> SentimentLevel:
    """Bucket a 0-100 score; each boundary belongs to the lower bucket."""

    if score <= 20:
        return SentimentLevel.EXTREME_FEAR
    if score <= 40:
        return SentimentLevel.FEAR
    if score <= 60:
        return SentimentLevel.NEUTRAL
    if score <= 80:
        return SentimentLevel.GREED
    return SentimentLevel.EXTREME_GREED


def sentiment_label(level: SentimentLevel) -> str:
    return _SENTIMENT_LABELS[level]


class VolatilityLevel(str, Enum):
    LOW = "Low"
    NORMAL = "Normal"
    ELEVATED = "Elevated"
    EXTREME = "Extreme"


def volatility_level(value: float) -> VolatilityLevel:
    """Classify a volatility index level.

    Thresholds:
        < 12  -> Low
        12-19 -> Normal
        20-29 -> Elevated
        >= 30 -> Extreme
    """

    if value < 12:
        return VolatilityLevel.LOW
    if value < 20:
        return VolatilityLevel.NORMAL
    if value < 30:
        return VolatilityLevel.ELEVATED
    return VolatilityLevel.EXTREME


__all__ = [
    "SentimentLevel",
    "VolatilityLevel",
    "sentiment_label",
    "sentiment_level",
    "volatility_level",
]
