"""Detection of protocol system and infrastructure transactions."""

from __future__ import annotations

from typing import Any

from txrisk.models import ExplorerTransaction
from txrisk.utils.addresses import lowered, safe_decimal

L1_BLOCK_ADDRESS = "0x4200000000000000000000000000000000000015"
SYSTEM_DEPOSITOR_ADDRESS = "0xdeaddeaddeaddeaddeaddeaddeaddeaddead0001"

SYSTEM_TARGET_ADDRESSES = frozenset({L1_BLOCK_ADDRESS})
SYSTEM_SENDER_ADDRESSES = frozenset({SYSTEM_DEPOSITOR_ADDRESS})

L1_SYNC_METHOD_PREFIX = "setl1blockvalues"
ORACLE_TRANSMIT_METHOD = "transmit("

SYSTEM_TX_TYPE = 126


def target_address(tx: ExplorerTransaction) -> str:
    return lowered(tx.recipient.hash) if tx.recipient else ""


def sender_address(tx: ExplorerTransaction) -> str:
    return lowered(tx.sender.hash) if tx.sender else ""


def method_call(tx: ExplorerTransaction) -> str:
    return lowered(tx.decoded_input.method_call) if tx.decoded_input else ""


def is_l1_sync(tx: ExplorerTransaction) -> bool:
    return target_address(tx) in SYSTEM_TARGET_ADDRESSES or method_call(tx).startswith(L1_SYNC_METHOD_PREFIX)


def is_oracle_transmission(tx: ExplorerTransaction) -> bool:
    return ORACLE_TRANSMIT_METHOD in method_call(tx)


def is_zero_gas_system_type(tx: ExplorerTransaction) -> bool:
    if str(tx.type) != str(SYSTEM_TX_TYPE):
        return False
    return safe_decimal(tx.gas_price) == 0


def is_system_sender(tx: ExplorerTransaction) -> bool:
    return sender_address(tx) in SYSTEM_SENDER_ADDRESSES


def is_system_transaction(tx: Any) -> bool:
    """Return True for L1 sync, oracle and deposit-style system transactions."""
    tx = ExplorerTransaction.coerce(tx)
    return (
        is_l1_sync(tx)
        or is_system_sender(tx)
        or is_oracle_transmission(tx)
        or is_zero_gas_system_type(tx)
    )


__all__ = [
    "L1_BLOCK_ADDRESS",
    "SYSTEM_DEPOSITOR_ADDRESS",
    "SYSTEM_TX_TYPE",
    "is_l1_sync",
    "is_oracle_transmission",
    "is_system_sender",
    "is_zero_gas_system_type",
    "is_system_transaction",
]
