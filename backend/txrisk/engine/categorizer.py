"""Map explorer transactions onto display personas.

Rules are evaluated in priority order and the first match wins; a generic
low-risk persona is returned when nothing matches.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Tuple

from txrisk.engine import system_detector
from txrisk.engine.scorer import UINT256_MAX
from txrisk.models import AddressInfo, CategoryDescriptor, ExplorerTransaction
from txrisk.utils.addresses import lowered, safe_decimal

LOGGER = logging.getLogger(__name__)

APPROVE_METHOD_ID = "0x095ea7b3"
TRANSFER_METHOD_ID = "0xa9059cbb"
INFINITE_HEX_PATTERN = re.compile(r"^(0x)?f{60,}$", re.IGNORECASE)
UINT256_MAX_INT = int(UINT256_MAX)

GWEI = Decimal(10) ** 9
WEI_PER_ETH = Decimal(10) ** 18
MEV_GAS_PRICE_WEI = 100 * GWEI
CHEAP_GAS_PRICE_WEI = 10 * GWEI
WHALE_VALUE_WEI = 10 * WEI_PER_ETH


def _persona(name: str, description: str, risk_level: str, category: str) -> CategoryDescriptor:
    return CategoryDescriptor(name=name, description=description, risk_level=risk_level, category=category)


MALICIOUS = _persona(
    "Toxic Predator", "Malicious contract attempting to steal funds or data", "CRITICAL", "Malicious Activity"
)
FAILED = _persona(
    "Pufferfish Trap", "Failed transaction that could indicate a trap or error", "HIGH", "Failed Transaction"
)
PROXY = _persona("Proxy Operator", "Executes operations through proxy contracts", "HIGH", "Proxy Operation")
L1_SYNC = _persona(
    "L1 Sync Beacon",
    "L1 to L2 state synchronization keeping the network in sync",
    "LOW",
    "Network Infrastructure",
)
ORACLE = _persona("Oracle Pulse", "Oracle reporting real-world data to the blockchain", "LOW", "Oracle Network")
SYSTEM_KEEPER = _persona(
    "System Keeper", "Network maintenance keeping the blockchain healthy", "LOW", "System Maintenance"
)
DEFI_TRADER = _persona(
    "DeFi Trader", "Engaged in decentralized exchange operations and trading", "MODERATE", "DeFi Trading"
)
TOKEN_APPROVER = _persona("Token Approver", "Setting controlled token spending limits", "LOW", "Token Approval")
INFINITE_APPROVER = _persona(
    "Infinite Approver",
    "Granting unlimited token spending permissions, use caution",
    "HIGH",
    "Token Approval",
)
BRIDGE = _persona(
    "Bridge Navigator", "Cross-chain asset transfers connecting different networks", "MODERATE", "Cross-chain Bridge"
)
CONTRACT_CREATOR = _persona(
    "Contract Creator", "Deploying new smart contracts to the blockchain", "MODERATE", "Contract Deployment"
)
DEFI_BANKER = _persona("DeFi Banker", "Managing loans and lending protocols", "MODERATE", "DeFi Lending")
YIELD_FARMER = _persona(
    "Yield Farmer", "Cultivating profits through liquidity provision and staking", "MODERATE", "Yield Farming"
)
USDC_CUSTODIAN = _persona("USDC Custodian", "Managing USD Coin, the reliable digital dollar", "LOW", "Stablecoin")
TETHER_GUARDIAN = _persona("Tether Guardian", "Handling USDT, the most traded stablecoin", "LOW", "Stablecoin")
ETH_WRAPPER = _persona(
    "ETH Wrapper", "Converting between ETH and WETH for DeFi compatibility", "LOW", "Token Wrapping"
)
MEV_HUNTER = _persona(
    "MEV Hunter", "Extracting maximal extractable value through arbitrage", "MODERATE", "MEV Activity"
)
NFT_COLLECTOR = _persona("NFT Collector", "Trading unique digital assets and collectibles", "LOW", "NFT Trading")
MULTISIG = _persona(
    "Multi-Sig Coordinator", "Managing multi-signature wallet operations", "LOW", "Multi-Signature"
)
WHALE = _persona("Whale Trader", "High-value transactions moving significant capital", "MODERATE", "High Value")
GAS_OPTIMIZER = _persona(
    "Gas Optimizer", "Smart trader minimizing transaction costs", "LOW", "Gas Optimization"
)
INTERNAL = _persona(
    "Internal Navigator", "Contract-to-contract communication and internal calls", "LOW", "Internal Transaction"
)
TOKEN_COURIER = _persona(
    "Token Courier", "Moving tokens between addresses across the network", "LOW", "Token Transfer"
)
BATCH_DISTRIBUTOR = _persona(
    "Batch Distributor", "Efficiently distributing tokens to multiple recipients", "LOW", "Batch Transfer"
)
CONTRACT_WHISPERER = _persona(
    "Contract Whisperer", "Mysterious interactions with smart contracts", "LOW", "Contract Interaction"
)
DEFAULT = _persona("Transaction Miner", "Standard blockchain transaction processing", "LOW", "Standard Current")


@dataclass(frozen=True)
class TransactionView:
    """Lowercased text fields of a transaction, computed once per categorization."""

    tx: ExplorerTransaction
    from_name: str
    to_name: str
    tx_type: str
    method_call: str
    method_id: str

    @classmethod
    def of(cls, tx: ExplorerTransaction) -> "TransactionView":
        decoded = tx.decoded_input
        return cls(
            tx=tx,
            from_name=lowered(tx.sender.name) if tx.sender else "",
            to_name=lowered(tx.recipient.name) if tx.recipient else "",
            tx_type=str(tx.type).lower() if tx.type is not None else "",
            method_call=lowered(decoded.method_call) if decoded else "",
            method_id=lowered(decoded.method_id) if decoded else "",
        )

    def either_name(self, *needles: str) -> bool:
        return any(needle in self.from_name or needle in self.to_name for needle in needles)

    def method_contains(self, *needles: str) -> bool:
        return any(needle in self.method_call for needle in needles)


@dataclass(frozen=True)
class CategoryRule:
    name: str
    matches: Callable[[TransactionView], bool]
    build: Callable[[TransactionView], CategoryDescriptor]


def _constant(descriptor: CategoryDescriptor) -> Callable[[TransactionView], CategoryDescriptor]:
    return lambda _view: descriptor


def _side(info: AddressInfo | None, attribute: str) -> bool:
    return bool(info is not None and getattr(info, attribute))


def _is_scam(view: TransactionView) -> bool:
    return _side(view.tx.sender, "is_scam") or _side(view.tx.recipient, "is_scam")


def _is_failed(view: TransactionView) -> bool:
    return view.tx.success is False


def _is_proxy(view: TransactionView) -> bool:
    return view.tx_type == "delegatecall" or view.either_name("proxy")


def _system_persona(view: TransactionView) -> CategoryDescriptor:
    tx = view.tx
    if system_detector.is_l1_sync(tx):
        return L1_SYNC
    if "commitstore" in view.to_name or system_detector.is_oracle_transmission(tx):
        return ORACLE
    return SYSTEM_KEEPER


def _is_dex(view: TransactionView) -> bool:
    return view.either_name("uniswap", "router")


def _is_approval(view: TransactionView) -> bool:
    return view.method_id == APPROVE_METHOD_ID or "approve" in view.method_call


def _is_unlimited(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value == UINT256_MAX_INT
    text = str(value).strip()
    return text == UINT256_MAX or bool(INFINITE_HEX_PATTERN.match(text))


def _approval_persona(view: TransactionView) -> CategoryDescriptor:
    parameters = view.tx.decoded_input.parameters if view.tx.decoded_input else []
    if any(_is_unlimited(parameter.value) for parameter in parameters if parameter.value is not None):
        return INFINITE_APPROVER
    return TOKEN_APPROVER


def _is_bridge(view: TransactionView) -> bool:
    return view.either_name("bridge", "spoke")


def _is_deployment(view: TransactionView) -> bool:
    return bool(view.tx.created_contract)


def _is_lending(view: TransactionView) -> bool:
    return view.either_name("aave", "compound") or view.method_contains("borrow", "lend", "repay", "supply")


def _is_yield(view: TransactionView) -> bool:
    return view.method_contains("stake", "unstake", "addliquidity", "removeliquidity") or view.either_name(
        "pool", "farm"
    )


def _is_stable_or_wrapped(view: TransactionView) -> bool:
    return view.either_name("usdc", "tether", "usdt", "weth")


def _stable_persona(view: TransactionView) -> CategoryDescriptor:
    if view.either_name("usdc"):
        return USDC_CUSTODIAN
    if view.either_name("tether", "usdt"):
        return TETHER_GUARDIAN
    return ETH_WRAPPER


def _gas_price(view: TransactionView) -> Decimal | None:
    return safe_decimal(view.tx.gas_price)


def _is_mev(view: TransactionView) -> bool:
    value = safe_decimal(view.tx.value)
    gas_price = _gas_price(view)
    return value == 0 and gas_price is not None and gas_price > MEV_GAS_PRICE_WEI


def _is_nft(view: TransactionView) -> bool:
    if view.either_name("opensea", "nft"):
        return True
    return "safetransferfrom" in view.method_call and "721" in view.method_call


def _is_multisig(view: TransactionView) -> bool:
    return view.either_name("multisig", "gnosis") or view.method_contains("confirmt", "executet")


def _is_whale(view: TransactionView) -> bool:
    return safe_decimal(view.tx.value, Decimal(0)) > WHALE_VALUE_WEI


def _is_cheap_gas(view: TransactionView) -> bool:
    gas_price = _gas_price(view)
    return gas_price is not None and gas_price < CHEAP_GAS_PRICE_WEI


def _is_internal(view: TransactionView) -> bool:
    return bool(view.tx.internal_transaction) or (view.tx.type == "call" and not view.tx.input)


def _is_token_transfer(view: TransactionView) -> bool:
    return view.method_id == TRANSFER_METHOD_ID or bool(view.tx.token_transfers) or "transfer(" in view.method_call


def _transfer_persona(view: TransactionView) -> CategoryDescriptor:
    if len(view.tx.token_transfers) > 1:
        return BATCH_DISTRIBUTOR
    return TOKEN_COURIER


def _is_bare_contract_call(view: TransactionView) -> bool:
    return _side(view.tx.recipient, "is_contract") and not view.method_call


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule("malicious", _is_scam, _constant(MALICIOUS)),
    CategoryRule("failed", _is_failed, _constant(FAILED)),
    CategoryRule("proxy", _is_proxy, _constant(PROXY)),
    CategoryRule("system", lambda view: system_detector.is_system_transaction(view.tx), _system_persona),
    CategoryRule("dex", _is_dex, _constant(DEFI_TRADER)),
    CategoryRule("approval", _is_approval, _approval_persona),
    CategoryRule("bridge", _is_bridge, _constant(BRIDGE)),
    CategoryRule("deployment", _is_deployment, _constant(CONTRACT_CREATOR)),
    CategoryRule("lending", _is_lending, _constant(DEFI_BANKER)),
    CategoryRule("yield", _is_yield, _constant(YIELD_FARMER)),
    CategoryRule("stablecoin", _is_stable_or_wrapped, _stable_persona),
    CategoryRule("mev", _is_mev, _constant(MEV_HUNTER)),
    CategoryRule("nft", _is_nft, _constant(NFT_COLLECTOR)),
    CategoryRule("multisig", _is_multisig, _constant(MULTISIG)),
    CategoryRule("whale", _is_whale, _constant(WHALE)),
    CategoryRule("gas", _is_cheap_gas, _constant(GAS_OPTIMIZER)),
    CategoryRule("internal", _is_internal, _constant(INTERNAL)),
    CategoryRule("transfer", _is_token_transfer, _transfer_persona),
    CategoryRule("contract", _is_bare_contract_call, _constant(CONTRACT_WHISPERER)),
)


def categorize(tx: Any) -> CategoryDescriptor:
    """Return the persona of the first matching rule, or the default persona."""
    tx = ExplorerTransaction.coerce(tx)
    view = TransactionView.of(tx)
    for rule in CATEGORY_RULES:
        if rule.matches(view):
            return rule.build(view)
    LOGGER.debug("No category rule matched %s, using default", tx.hash)
    return DEFAULT


__all__ = [
    "CategoryRule",
    "CATEGORY_RULES",
    "TransactionView",
    "DEFAULT",
    "categorize",
]
