"""Domain models shared by the scoring, history and alignment services."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SignalSet:
    """Already-fetched raw market signals for one scoring call.

    Any field may be ``None`` when the upstream source was unavailable.
    """

    sentiment: Optional[float] = None
    volatility: Optional[float] = None
    rate_change_pct: Optional[float] = None
    dollar_change_pct: Optional[float] = None


@dataclass(frozen=True)
class DaySnapshot:
    """One calendar day's composite score and contributing signals."""

    date: str
    composite: int
    sentiment: Optional[float] = None
    volatility: Optional[float] = None
    rate_change_pct: Optional[float] = None
    dollar_change_pct: Optional[float] = None
    market_open: bool = True

    def __post_init__(self) -> None:
        if self.market_open:
            return
        signals = (self.sentiment, self.volatility, self.rate_change_pct, self.dollar_change_pct)
        if self.composite != 50 or any(value is not None for value in signals):
            raise ValueError(f"Closed-market snapshot for {self.date} must score 50 with no signals")

    @classmethod
    def closed(cls, date_key: str) -> "DaySnapshot":
        """Placeholder for a day without market activity."""

        return cls(date=date_key, composite=50, market_open=False)


@dataclass(frozen=True)
class PricePoint:
    """A single point of an instrument's price series (epoch seconds)."""

    timestamp: int
    price: Optional[float]


@dataclass(frozen=True)
class PeriodReturn:
    price: float
    change_percent: float


@dataclass(frozen=True)
class Trade:
    """A buy or sell recorded against a watchlist symbol."""

    id: str
    type: str
    date: date
    price: float
    quantity: float

    def normalized_type(self) -> str:
        """Return the lower-cased trade type for consistent comparisons."""

        return self.type.lower()


@dataclass
class PositionSummary:
    avg_cost: float = 0.0
    total_qty: float = 0.0
    realized_pl: float = 0.0
    invested_amount: float = 0.0
    trade_count: int = 0
    notes: list[str] = field(default_factory=list)


__all__ = [
    "SignalSet",
    "DaySnapshot",
    "PricePoint",
    "PeriodReturn",
    "Trade",
    "PositionSummary",
]
