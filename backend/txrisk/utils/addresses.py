"""Helpers for validating and normalizing blockchain addresses and numeric fields."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


def normalize_eth_address(value: str) -> str:
    """Validate and normalize an Ethereum address to lowercase hex."""
    if value is None:
        raise ValueError("Address cannot be null")
    if not isinstance(value, str):
        raise ValueError("Address must be a string")
    address = value.strip()
    if not ADDRESS_PATTERN.fullmatch(address):
        raise ValueError("Invalid Ethereum address format")
    return address.lower()


def lowered(value: Any) -> str:
    """Return a lowercase string for text values and an empty string otherwise."""
    if isinstance(value, str):
        return value.lower()
    return ""


def safe_decimal(value: Any, default: Decimal | None = None) -> Decimal | None:
    """Parse wei/gwei style numeric values without raising.

    Booleans, blanks and unparsable strings yield ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return Decimal(str(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            if text.lower().startswith("0x"):
                return Decimal(int(text, 16))
            parsed = Decimal(text)
        except (InvalidOperation, ValueError):
            return default
        if not parsed.is_finite():
            return default
        return parsed
    return default


__all__ = ["normalize_eth_address", "lowered", "safe_decimal"]
