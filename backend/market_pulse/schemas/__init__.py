"""Pydantic schema exports."""

from .composite import CompositeResponse, SignalScoreSchema, SignalSetSchema
from .history import (
    BackfillRequest,
    BackfillResponse,
    DaySnapshotSchema,
    HistoryResponse,
    LiveSnapshotRequest,
    PricePointSchema,
    SentimentPointSchema,
)
from .positions import PositionRequest, PositionResponse, TradeSchema
from .returns import PeriodReturnSchema, ReturnsRequest, ReturnsResponse

__all__ = [
    "CompositeResponse",
    "SignalScoreSchema",
    "SignalSetSchema",
    "BackfillRequest",
    "BackfillResponse",
    "DaySnapshotSchema",
    "HistoryResponse",
    "LiveSnapshotRequest",
    "PricePointSchema",
    "SentimentPointSchema",
    "PositionRequest",
    "PositionResponse",
    "TradeSchema",
    "PeriodReturnSchema",
    "ReturnsRequest",
    "ReturnsResponse",
]
