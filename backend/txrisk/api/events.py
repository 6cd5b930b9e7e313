"""Endpoint for recording risk events reported by the client."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import APIRouter, HTTPException

from txrisk.models import RiskEventRecord, RiskEventRequest
from txrisk.utils.addresses import normalize_eth_address

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.post("/risk", response_model=RiskEventRecord)
def record_risk_event(payload: RiskEventRequest) -> RiskEventRecord:
    """Validate and acknowledge a risk event for a player address."""
    try:
        player = normalize_eth_address(payload.player)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid player address") from exc

    event_type = payload.event_type.strip()
    if not event_type:
        raise HTTPException(status_code=400, detail="Invalid event type")

    record = RiskEventRecord(
        event_id=uuid4().hex,
        player=player,
        risk_score=payload.risk_score,
        event_type=event_type,
        recorded_at=datetime.now(timezone.utc),
    )
    LOGGER.info("Recording risk event %s: %s, risk: %s, type: %s", record.event_id, player, payload.risk_score, event_type)
    return record


__all__ = ["router"]
