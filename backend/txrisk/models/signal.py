"""Pydantic schemas for the normalized transaction signal consumed by the risk scorer."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import Field, field_validator

from .lenient import LenientModel

UINT256_MAX_INT = 2**256 - 1


class ListFlags(LenientModel):
    """Blocklist / allowlist memberships resolved by the acquisition layer."""

    address_on_blocklist: Optional[bool] = Field(None, alias="addressOnBlocklist")
    protocol_allowlisted: Optional[bool] = Field(None, alias="protocolAllowlisted")
    token_allowlisted: Optional[bool] = Field(None, alias="tokenAllowlisted")


class TokenSignal(LenientModel):
    """Metadata about the token moved by the transaction."""

    name: Optional[str] = None
    address: Optional[str] = None
    contract_age_days: Optional[float] = Field(None, alias="contractAgeDays")
    verified: Optional[bool] = None
    liquidity_usd: Optional[float] = Field(None, alias="liquidityUSD")
    top_holders_pct: Optional[float] = Field(None, alias="topHoldersPct")
    not_allowlisted: Optional[bool] = Field(None, alias="notAllowlisted")


class ApprovalSignal(LenientModel):
    """ERC-20 approval call details."""

    method: Optional[str] = None
    amount: Optional[str] = None
    spender_allowlisted: Optional[bool] = Field(None, alias="spenderAllowlisted")
    spender_verified: Optional[bool] = Field(None, alias="spenderVerified")

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_decimal_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            # Outside uint256, cannot match an approval amount.
            if value < 0 or value > UINT256_MAX_INT:
                return None
            return str(value)
        return value


class DexSignal(LenientModel):
    """Swap venue details."""

    name: Optional[str] = None
    slippage_pct: Optional[float] = Field(None, alias="slippagePct")
    pool_liquidity_usd: Optional[float] = Field(None, alias="poolLiquidityUSD")


class MevSignal(LenientModel):
    """Sandwich detection output for the transaction."""

    is_sandwich_leg: Optional[bool] = Field(None, alias="isSandwichLeg")
    same_pool: Optional[bool] = Field(None, alias="samePool")
    role: Optional[str] = None
    profit_usd: Optional[float] = Field(None, alias="profitUSD")


class GasSignal(LenientModel):
    over_p99_1h: Optional[bool] = Field(None, alias="overP99_1h")


class TransactionSignal(LenientModel):
    """Loosely structured signal record; every group is optional."""

    id: Optional[Union[int, str]] = None
    hash: Optional[str] = None
    sender: Optional[str] = Field(None, alias="from")
    recipient: Optional[str] = Field(None, alias="to")
    category: Optional[str] = None
    lists: Optional[ListFlags] = None
    type_hints: List[str] = Field(default_factory=list, alias="typeHints")
    token: Optional[TokenSignal] = None
    approval: Optional[ApprovalSignal] = None
    dex: Optional[DexSignal] = None
    mev: Optional[MevSignal] = None
    gas: Optional[GasSignal] = None

    @field_validator("type_hints", mode="before")
    @classmethod
    def _collect_hints(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple, set, frozenset)):
            return [hint for hint in value if isinstance(hint, str)]
        return value

    def has_hint(self, hint: str) -> bool:
        return hint in self.type_hints


__all__ = [
    "ListFlags",
    "TokenSignal",
    "ApprovalSignal",
    "DexSignal",
    "MevSignal",
    "GasSignal",
    "TransactionSignal",
]
