"""Heuristic risk scoring for normalized transaction signals.

Four independent rule groups contribute points and reasons:

* BT1 scam token transfer
* BT2 suspicious approval
* BT3 extreme-slippage swap
* BT4 MEV sandwich leg

Points from every group that fires are summed, reduced by an allowlist
easing discount and clamped at zero. The label uses group-specific
thresholds so that niche high-risk patterns turn BAD earlier than ordinary
transfers.
"""

from __future__ import annotations

import logging
from typing import Any, List, NamedTuple

from txrisk.models import (
    DexSignal,
    GasSignal,
    ListFlags,
    MevSignal,
    RiskVerdict,
    TokenSignal,
    TransactionSignal,
)

LOGGER = logging.getLogger(__name__)

UINT256_MAX = "115792089237316195423570985008687907853269984665640564039457584007913129639935"

BLOCKLIST_RISK = 99
UNKNOWN_CONTRACT_AGE_DAYS = 999
ESTABLISHED_TOKEN_AGE_DAYS = 90

BAD_THRESHOLD = 40
SWAP_BAD_THRESHOLD = 35
TRANSFER_BAD_THRESHOLD = 30

MEV_ROLES = ("FRONT-RUN", "BACK-RUN")


class RuleHit(NamedTuple):
    group: str
    points: int
    reason: str


def _token(signal: TransactionSignal) -> TokenSignal:
    return signal.token or TokenSignal()


def _contract_age(token: TokenSignal) -> float:
    if token.contract_age_days is None:
        return UNKNOWN_CONTRACT_AGE_DAYS
    return token.contract_age_days


def _below(value, limit) -> bool:
    """Missing values never count as below a limit."""
    return value is not None and value < limit


def allowlist_easing(signal: TransactionSignal) -> int:
    """Discount subtracted from the raw score for allowlisted protocols and tokens."""
    lists = signal.lists or ListFlags()
    token = _token(signal)

    easing = 0
    if lists.protocol_allowlisted:
        easing += 20
    if token.verified and token.contract_age_days is not None and token.contract_age_days > ESTABLISHED_TOKEN_AGE_DAYS:
        easing += 10
    if lists.token_allowlisted:
        easing += 10
    return easing


def scam_transfer_hits(signal: TransactionSignal) -> List[RuleHit]:
    """BT1: transfer of a young, unverified, illiquid or concentrated token."""
    token = _token(signal)
    if not (signal.has_hint("Transfer") and token.not_allowlisted):
        return []

    new_token = _contract_age(token) < 7
    unverified = not token.verified
    low_liquidity = _below(token.liquidity_usd, 10000)
    concentrated = (token.top_holders_pct or 0) > 90
    if not (new_token or unverified or low_liquidity or concentrated):
        return []

    hits: List[RuleHit] = []
    if new_token:
        hits.append(RuleHit("BT1", 20, "New token (<7d)"))
    if unverified:
        hits.append(RuleHit("BT1", 15, "Unverified token"))
    # Always true here, notAllowlisted is part of the gate.
    if token.not_allowlisted:
        hits.append(RuleHit("BT1", 20, "Token not allowlisted"))
    if low_liquidity:
        hits.append(RuleHit("BT1", 15, "Low liquidity"))
    if concentrated:
        hits.append(RuleHit("BT1", 15, "Holder concentration"))
    return hits


def approval_hits(signal: TransactionSignal) -> List[RuleHit]:
    """BT2: unlimited approval granted to an unknown or unverified spender."""
    approval = signal.approval
    if approval is None or approval.method != "approve":
        return []

    hits: List[RuleHit] = []
    if approval.amount == UINT256_MAX:
        hits.append(RuleHit("BT2", 25, "Infinite approval"))
    if approval.spender_allowlisted is False:
        hits.append(RuleHit("BT2", 20, "Unknown spender"))
    if approval.spender_verified is False:
        hits.append(RuleHit("BT2", 15, "Unverified spender"))
    return hits


def swap_hits(signal: TransactionSignal) -> List[RuleHit]:
    """BT3: swap with extreme slippage through a thin pool."""
    dex = signal.dex or DexSignal()
    if not (signal.has_hint("Swap") or dex.name):
        return []

    gas = signal.gas or GasSignal()
    hits: List[RuleHit] = []
    if (dex.slippage_pct or 0) > 15:
        hits.append(RuleHit("BT3", 25, "High slippage"))
    if _below(dex.pool_liquidity_usd, 50000):
        hits.append(RuleHit("BT3", 15, "Thin liquidity pool"))
    if _token(signal).not_allowlisted:
        hits.append(RuleHit("BT3", 15, "Exotic token"))
    if gas.over_p99_1h:
        hits.append(RuleHit("BT3", 10, "Anomalous gas"))
    return hits


def sandwich_hits(signal: TransactionSignal) -> List[RuleHit]:
    """BT4: leg of an MEV sandwich."""
    mev = signal.mev or MevSignal()
    if not mev.is_sandwich_leg:
        return []

    hits: List[RuleHit] = []
    if mev.same_pool:
        hits.append(RuleHit("BT4", 25, "Same pool/block pattern"))
    if mev.role in MEV_ROLES:
        hits.append(RuleHit("BT4", 20, f"MEV {mev.role}"))
    if (mev.profit_usd or 0) > 0:
        hits.append(RuleHit("BT4", 10, "Positive MEV profit"))
    return hits


RULE_GROUPS = (scam_transfer_hits, approval_hits, swap_hits, sandwich_hits)


def rule_hits(signal: TransactionSignal) -> List[RuleHit]:
    """Every triggered condition across all rule groups, in evaluation order."""
    hits: List[RuleHit] = []
    for group in RULE_GROUPS:
        hits.extend(group(signal))
    return hits


def _is_bad(signal: TransactionSignal, risk: int) -> bool:
    if risk >= BAD_THRESHOLD:
        return True
    if risk >= SWAP_BAD_THRESHOLD and (signal.has_hint("Swap") or signal.dex is not None):
        return True
    return risk >= TRANSFER_BAD_THRESHOLD and signal.has_hint("Transfer")


def score(signal: Any) -> RiskVerdict:
    """Score a transaction signal; accepts a ``TransactionSignal`` or a raw mapping."""
    signal = TransactionSignal.coerce(signal)

    if signal.lists is not None and signal.lists.address_on_blocklist:
        LOGGER.debug("Blocklisted address short-circuit for %s", signal.hash or signal.id)
        return RiskVerdict(risk=BLOCKLIST_RISK, label="BAD", reasons=["Blocklisted address"])

    hits = rule_hits(signal)
    if hits:
        LOGGER.debug(
            "Rule groups fired for %s: %s",
            signal.hash or signal.id,
            ", ".join(dict.fromkeys(hit.group for hit in hits)),
        )
    raw = sum(hit.points for hit in hits)
    risk = max(0, raw - allowlist_easing(signal))
    label = "BAD" if _is_bad(signal, risk) else "GOOD"

    return RiskVerdict(risk=risk, label=label, reasons=[hit.reason for hit in hits])


__all__ = [
    "UINT256_MAX",
    "RuleHit",
    "allowlist_easing",
    "scam_transfer_hits",
    "approval_hits",
    "swap_hits",
    "sandwich_hits",
    "rule_hits",
    "score",
]
