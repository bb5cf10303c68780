"""Composite market-sentiment score.

Normalizes the individual market signals onto a common 0-100 scale and
combines them with fixed weights. Signals that are unavailable are dropped
and the remaining weights are renormalized, so a single present signal
carries the whole score.

0 reads as extreme fear / a cold market, 100 as extreme greed / a hot one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from market_pulse.models import SignalSet

NEUTRAL_SCORE = 50

SENTIMENT_WEIGHT = 40
VOLATILITY_WEIGHT = 30
RATE_WEIGHT = 15
DOLLAR_WEIGHT = 15

VOLATILITY_FLOOR = 10.0
VOLATILITY_CEILING = 40.0
RATE_CHANGE_LIMIT = 3.0
DOLLAR_CHANGE_LIMIT = 2.0


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going toward positive infinity.

    Unlike ``round()``, ``-2.5`` becomes ``-2`` and ``2.5`` becomes ``3``.
    """

    if digits == 0:
        return float(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def normalize_sentiment(value: float) -> float:
    return clamp(value, 0.0, 100.0)


def normalize_volatility(value: float) -> float:
    clamped = clamp(value, VOLATILITY_FLOOR, VOLATILITY_CEILING)
    span = VOLATILITY_CEILING - VOLATILITY_FLOOR
    return round_half_up(100 - ((clamped - VOLATILITY_FLOOR) / span) * 100)


def normalize_rate_change(value: float) -> float:
    clamped = clamp(value, -RATE_CHANGE_LIMIT, RATE_CHANGE_LIMIT)
    return round_half_up(50 - (clamped / RATE_CHANGE_LIMIT) * 50)


def normalize_dollar_change(value: float) -> float:
    clamped = clamp(value, -DOLLAR_CHANGE_LIMIT, DOLLAR_CHANGE_LIMIT)
    return round_half_up(50 - (clamped / DOLLAR_CHANGE_LIMIT) * 50)


@dataclass(frozen=True)
class SignalRule:
    name: str
    weight: int
    normalize: Callable[[float], float]


# Order matters: the weighted sum is accumulated in this order.
SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule("sentiment", SENTIMENT_WEIGHT, normalize_sentiment),
    SignalRule("volatility", VOLATILITY_WEIGHT, normalize_volatility),
    SignalRule("rate_change_pct", RATE_WEIGHT, normalize_rate_change),
    SignalRule("dollar_change_pct", DOLLAR_WEIGHT, normalize_dollar_change),
)


@dataclass(frozen=True)
class SignalScore:
    """Normalized contribution of one present signal."""

    name: str
    raw: float
    weight: int
    score: float


def score_breakdown(signals: SignalSet) -> List[SignalScore]:
    """Return the normalized sub-score of every present signal."""

    entries: List[SignalScore] = []
    for rule in SIGNAL_RULES:
        raw: Optional[float] = getattr(signals, rule.name)
        if raw is None:
            continue
        entries.append(
            SignalScore(name=rule.name, raw=float(raw), weight=rule.weight, score=rule.normalize(float(raw)))
        )
    return entries


def compute_composite(signals: SignalSet) -> int:
    """Combine the present signals into one integer score in [0, 100].

    Returns ``NEUTRAL_SCORE`` when no signal is available.
    """

    entries = score_breakdown(signals)
    if not entries:
        return NEUTRAL_SCORE

    total_weight = sum(entry.weight for entry in entries)
    weighted = 0.0
    for entry in entries:
        weighted += entry.score * entry.weight / total_weight
    return int(clamp(round_half_up(weighted), 0, 100))


__all__ = [
    "NEUTRAL_SCORE",
    "SIGNAL_RULES",
    "SignalRule",
    "SignalScore",
    "clamp",
    "compute_composite",
    "normalize_dollar_change",
    "normalize_rate_change",
    "normalize_sentiment",
    "normalize_volatility",
    "round_half_up",
    "score_breakdown",
]
