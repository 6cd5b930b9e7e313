"""Compatibility path for demo records that carry a ``category`` tag."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Tuple, Union

from txrisk.engine.explorer_risk import assess_explorer_transaction, risk_level_for_score
from txrisk.engine.scorer import score
from txrisk.models import (
    ExplorerRiskAssessment,
    LegacyClassification,
    TransactionSignal,
)

LOGGER = logging.getLogger(__name__)

# tag -> (name, description, risk level)
LEGACY_PERSONAS: Mapping[str, Tuple[str, str, str]] = MappingProxyType({
    "Scam Token Transfer": (
        "Scam Token Hunter",
        "Specializes in detecting newly deployed scam tokens with suspicious characteristics",
        "CRITICAL",
    ),
    "Suspicious Approval": (
        "Approval Guardian",
        "Monitors infinite approvals to unknown or unverified contracts",
        "HIGH",
    ),
    "Extreme Slippage Swap": (
        "Slippage Sentinel",
        "Identifies DEX swaps with extreme slippage and thin liquidity pools",
        "HIGH",
    ),
    "MEV Sandwich Attack": (
        "MEV Detective",
        "Tracks MEV sandwich attacks and front-running patterns",
        "CRITICAL",
    ),
})

UNCLASSIFIED_NAME = "Unclassified Pattern"
UNCLASSIFIED_DESCRIPTION = "Tagged transaction without a known persona"


def categorize_legacy(signal: Any) -> LegacyClassification:
    """Persona for a tagged signal record, carrying the scorer verdict alongside."""
    signal = TransactionSignal.coerce(signal)
    verdict = score(signal)
    tag = signal.category or ""

    persona = LEGACY_PERSONAS.get(tag)
    if persona is None:
        LOGGER.debug("Unknown legacy category tag %r", tag)
        name, description, risk_level = UNCLASSIFIED_NAME, UNCLASSIFIED_DESCRIPTION, risk_level_for_score(verdict.risk)
    else:
        name, description, risk_level = persona

    return LegacyClassification(
        name=name,
        description=description,
        risk_level=risk_level,
        category=tag,
        risk_analysis=verdict,
    )


def has_category_tag(record: Any) -> bool:
    if isinstance(record, TransactionSignal):
        return bool(record.category)
    if isinstance(record, Mapping):
        return bool(record.get("category"))
    return False


def classify(record: Any) -> Union[LegacyClassification, ExplorerRiskAssessment]:
    """Route tagged demo records through the legacy path and everything else to the explorer scorer."""
    if has_category_tag(record):
        return categorize_legacy(record)
    return assess_explorer_transaction(record)


__all__ = ["LEGACY_PERSONAS", "categorize_legacy", "has_category_tag", "classify"]
