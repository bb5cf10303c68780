"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .composite import router as composite_router
from .history import router as history_router
from .positions import router as positions_router
from .returns import router as returns_router

api_router = APIRouter()
api_router.include_router(composite_router, prefix="/composite", tags=["composite"])
api_router.include_router(history_router, prefix="/history", tags=["history"])
api_router.include_router(returns_router, prefix="/returns", tags=["returns"])
api_router.include_router(positions_router, prefix="/positions", tags=["positions"])

__all__ = ["api_router"]
