"""Schemas for recording risk events reported by the client."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class RiskEventRequest(BaseModel):
    """Risk event emitted when a player interacts with a classified transaction."""

    model_config = ConfigDict(populate_by_name=True)

    player: str = Field(..., description="Player wallet address")
    risk_score: StrictFloat = Field(..., alias="riskScore", ge=0)
    event_type: str = Field(..., alias="eventType", min_length=1)


class RiskEventRecord(BaseModel):
    """Acknowledgement returned once an event has been accepted."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    event_id: str = Field(..., alias="eventId")
    player: str
    risk_score: float = Field(..., alias="riskScore")
    event_type: str = Field(..., alias="eventType")
    recorded_at: datetime = Field(..., alias="recordedAt")


__all__ = ["RiskEventRequest", "RiskEventRecord"]
