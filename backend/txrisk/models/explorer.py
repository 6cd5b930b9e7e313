"""Pydantic schemas for explorer-format (Blockscout style) transactions."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from .lenient import LenientModel

Numeric = Union[int, float, str]


class AddressInfo(LenientModel):
    """Explorer metadata about one side of a transaction."""

    hash: Optional[str] = None
    name: Optional[str] = None
    is_contract: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_scam: Optional[bool] = None


class DecodedParameter(LenientModel):
    name: Optional[str] = None
    type: Optional[str] = None
    value: Any = None


class DecodedInput(LenientModel):
    """ABI-decoded call data as reported by the explorer."""

    method_call: Optional[str] = None
    method_id: Optional[str] = None
    parameters: List[DecodedParameter] = Field(default_factory=list)

    @field_validator("parameters", mode="before")
    @classmethod
    def _mappings_only(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [item for item in value if isinstance(item, dict)]
        return value


class ExplorerTransaction(LenientModel):
    """Transaction record enriched with contract and account metadata."""

    hash: Optional[str] = Field(None, validation_alias=AliasChoices("hash", "transaction_hash"))
    sender: Optional[AddressInfo] = Field(None, alias="from")
    recipient: Optional[AddressInfo] = Field(None, alias="to")
    success: Optional[bool] = None
    type: Optional[Union[int, str]] = None
    gas_limit: Optional[Numeric] = None
    gas_price: Optional[Numeric] = None
    value: Optional[Numeric] = None
    input: Optional[str] = None
    decoded_input: Optional[DecodedInput] = None
    token_transfers: List[Any] = Field(default_factory=list)
    created_contract: Any = None
    internal_transaction: Optional[bool] = None
    block_number: Optional[int] = None
    timestamp: Optional[str] = None

    @field_validator("token_transfers", mode="before")
    @classmethod
    def _transfers_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @field_validator("sender", "recipient", mode="before")
    @classmethod
    def _bare_address(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"hash": value}
        return value


__all__ = ["AddressInfo", "DecodedParameter", "DecodedInput", "ExplorerTransaction"]
