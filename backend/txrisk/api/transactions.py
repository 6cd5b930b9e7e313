"""Endpoints that fetch or load transactions and classify them."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.concurrency import run_in_threadpool

from txrisk.ingest.blockscout_ingest import ingest_recent_transactions
from txrisk.ingest.sample_loader import load_sample_transactions

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/recent")
async def recent_transactions(limit: Optional[int] = Query(default=None, ge=1, le=50)) -> Dict[str, Any]:
    """Fetch the latest explorer transactions and assess each one."""
    try:
        result = await run_in_threadpool(ingest_recent_transactions, limit)
    except RuntimeError as exc:
        LOGGER.error("Failed to fetch recent transactions: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return {
        "status": "success",
        "message": f"Assessed {result['fetched_count']} recent transactions",
        "data": result,
    }


@router.post("/sample")
async def classify_sample_data(path: str | None = None) -> Dict[str, Any]:
    """Classify the bundled demo dataset."""
    try:
        result = await run_in_threadpool(load_sample_transactions, path)
    except FileNotFoundError as exc:
        LOGGER.warning("Sample data not found: %s", exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        LOGGER.warning("Sample data invalid: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "status": "success",
        "message": "Sample dataset classified",
        "data": result,
    }


__all__ = ["router"]
