"""Endpoints exposing the risk scorer and transaction categorizer."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from txrisk.engine.categorizer import categorize
from txrisk.engine.explorer_risk import assess_explorer_transaction
from txrisk.engine.legacy import categorize_legacy
from txrisk.engine.scorer import score
from txrisk.models import (
    CategoryDescriptor,
    ExplorerRiskAssessment,
    ExplorerTransaction,
    LegacyClassification,
    RiskVerdict,
    TransactionSignal,
)

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/risk", tags=["risk"])


@router.post("/score", response_model=RiskVerdict)
def score_signal(signal: TransactionSignal) -> RiskVerdict:
    """Run the heuristic rule battery over a transaction signal."""
    verdict = score(signal)
    LOGGER.info("Scored %s: risk=%d label=%s", signal.hash or "signal", verdict.risk, verdict.label)
    return verdict


@router.post("/categorize", response_model=CategoryDescriptor)
def categorize_transaction(tx: ExplorerTransaction) -> CategoryDescriptor:
    """Select the display persona for an explorer transaction."""
    return categorize(tx)


@router.post("/assess", response_model=ExplorerRiskAssessment)
def assess_transaction(tx: ExplorerTransaction) -> ExplorerRiskAssessment:
    """Score an explorer transaction and attach its persona."""
    assessment = assess_explorer_transaction(tx)
    LOGGER.info(
        "Assessed %s: risk=%d level=%s category=%s",
        tx.hash or "transaction",
        assessment.risk,
        assessment.level,
        assessment.category.category,
    )
    return assessment


@router.post("/legacy", response_model=LegacyClassification)
def classify_legacy(signal: TransactionSignal) -> LegacyClassification:
    """Classify a tagged demo record by its category tag."""
    if not signal.category:
        raise HTTPException(status_code=400, detail="Legacy records must include a category tag")
    return categorize_legacy(signal)


__all__ = ["router"]
