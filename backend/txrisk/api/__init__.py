"""API route definitions for the transaction risk engine."""

from fastapi import APIRouter

from .risk import router as risk_router
from .events import router as events_router
from .transactions import router as transactions_router


api_router = APIRouter()
api_router.include_router(risk_router)
api_router.include_router(events_router)
api_router.include_router(transactions_router)


__all__ = ["api_router"]
