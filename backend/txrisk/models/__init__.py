"""Pydantic data models exposed by the transaction risk engine."""

from .signal import (
    ApprovalSignal,
    DexSignal,
    GasSignal,
    ListFlags,
    MevSignal,
    TokenSignal,
    TransactionSignal,
)
from .explorer import AddressInfo, DecodedInput, DecodedParameter, ExplorerTransaction
from .verdicts import (
    CategoryDescriptor,
    ExplorerRiskAssessment,
    LegacyClassification,
    RiskLabel,
    RiskLevel,
    RiskVerdict,
)
from .events import RiskEventRecord, RiskEventRequest

__all__ = [
    "ApprovalSignal",
    "DexSignal",
    "GasSignal",
    "ListFlags",
    "MevSignal",
    "TokenSignal",
    "TransactionSignal",
    "AddressInfo",
    "DecodedInput",
    "DecodedParameter",
    "ExplorerTransaction",
    "CategoryDescriptor",
    "ExplorerRiskAssessment",
    "LegacyClassification",
    "RiskLabel",
    "RiskLevel",
    "RiskVerdict",
    "RiskEventRecord",
    "RiskEventRequest",
]
