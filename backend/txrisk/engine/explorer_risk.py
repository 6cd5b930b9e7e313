"""Additive risk scoring for explorer-format transactions."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Tuple

from txrisk.engine.categorizer import categorize
from txrisk.models import ExplorerRiskAssessment, ExplorerTransaction
from txrisk.utils.addresses import lowered, safe_decimal

HIGH_GAS_LIMIT = 500_000
MODERATE_GAS_LIMIT = 200_000

# (minimum score, level), highest first
RISK_LEVEL_BANDS: Tuple[Tuple[int, str], ...] = (
    (60, "CRITICAL"),
    (40, "HIGH"),
    (20, "MODERATE"),
)
EXPLORER_BAD_THRESHOLD = 40


def risk_level_for_score(risk: int) -> str:
    """Bucket a numeric risk score into LOW / MODERATE / HIGH / CRITICAL."""
    for minimum, level in RISK_LEVEL_BANDS:
        if risk >= minimum:
            return level
    return "LOW"


def explorer_risk_factors(tx: ExplorerTransaction) -> List[Tuple[int, str]]:
    factors: List[Tuple[int, str]] = []
    sender, recipient = tx.sender, tx.recipient

    if (sender and sender.is_scam) or (recipient and recipient.is_scam):
        factors.append((80, "Scam contract detected"))

    if tx.success is False:
        factors.append((15, "Failed transaction"))

    gas_limit = safe_decimal(tx.gas_limit, Decimal(0))
    if gas_limit > HIGH_GAS_LIMIT:
        factors.append((20, "High gas usage"))
    elif gas_limit > MODERATE_GAS_LIMIT:
        factors.append((10, "Moderate gas usage"))

    if sender and sender.is_contract and not sender.is_verified:
        factors.append((15, "Unverified source contract"))
    if recipient and recipient.is_contract and not recipient.is_verified:
        factors.append((15, "Unverified target contract"))

    if tx.type == "delegatecall":
        factors.append((25, "Delegate call (potential proxy risk)"))

    if sender and "router" in lowered(sender.name):
        factors.append((10, "Router interaction"))

    if safe_decimal(tx.value, Decimal(0)) > 0:
        factors.append((5, "Value transfer"))

    return factors


def assess_explorer_transaction(tx: Any) -> ExplorerRiskAssessment:
    """Score an explorer transaction and attach its persona."""
    tx = ExplorerTransaction.coerce(tx)
    factors = explorer_risk_factors(tx)
    risk = sum(points for points, _reason in factors)

    return ExplorerRiskAssessment(
        risk=risk,
        label="BAD" if risk >= EXPLORER_BAD_THRESHOLD else "GOOD",
        level=risk_level_for_score(risk),
        reasons=[reason for _points, reason in factors],
        category=categorize(tx),
    )


__all__ = ["risk_level_for_score", "explorer_risk_factors", "assess_explorer_transaction"]
