"""Schemas for the verdicts and category descriptors returned by the engine."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

RiskLabel = Literal["GOOD", "BAD"]
RiskLevel = Literal["LOW", "MODERATE", "HIGH", "CRITICAL"]


class RiskVerdict(BaseModel):
    """Heuristic scorer output."""

    model_config = ConfigDict(frozen=True)

    risk: int = Field(..., ge=0)
    label: RiskLabel
    reasons: List[str] = Field(default_factory=list)


class CategoryDescriptor(BaseModel):
    """Display persona selected for a transaction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    category: str


class ExplorerRiskAssessment(BaseModel):
    """Additive risk score for an explorer transaction together with its persona."""

    model_config = ConfigDict(frozen=True)

    risk: int = Field(..., ge=0)
    label: RiskLabel
    level: RiskLevel
    reasons: List[str] = Field(default_factory=list)
    category: CategoryDescriptor


class LegacyClassification(CategoryDescriptor):
    """Persona for a tagged demo record plus the scorer verdict it was derived with."""

    risk_analysis: RiskVerdict = Field(..., alias="riskAnalysis")


__all__ = [
    "RiskLabel",
    "RiskLevel",
    "RiskVerdict",
    "CategoryDescriptor",
    "ExplorerRiskAssessment",
    "LegacyClassification",
]
