"""Utilities for retrieving recent transactions from a Blockscout explorer and assessing them."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

import requests

from txrisk.engine.explorer_risk import assess_explorer_transaction
from txrisk.models import ExplorerTransaction
from txrisk.utils.settings import get_settings

LOGGER = logging.getLogger(__name__)

RECENT_TRANSACTIONS_PATH = "/internal-transactions"
MAX_FETCH_LIMIT = 50


def _clamp_limit(limit: Optional[int]) -> int:
    default = get_settings().transaction_fetch_limit
    try:
        value = int(limit) if limit else default
    except (TypeError, ValueError):
        value = default
    return max(1, min(MAX_FETCH_LIMIT, value))


def _fetch_transactions(limit: Optional[int] = None) -> List[ExplorerTransaction]:
    """Fetch the most recent explorer transactions via the Blockscout v2 API."""
    settings = get_settings()
    url = f"{settings.blockscout_api_url}{RECENT_TRANSACTIONS_PATH}"
    real_limit = _clamp_limit(limit)

    try:
        LOGGER.info("Requesting recent transactions from Blockscout at %s", url)
        response = requests.get(
            url,
            headers={"accept": "application/json"},
            timeout=settings.blockscout_timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        LOGGER.exception("Error calling Blockscout: %s", exc)
        raise RuntimeError("Failed to fetch transactions from Blockscout") from exc

    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        items = payload["items"]
    elif isinstance(payload, list):
        items = payload
    else:
        LOGGER.error("Unexpected Blockscout response format: %s", payload)
        raise RuntimeError("Unexpected Blockscout response format")

    transactions: List[ExplorerTransaction] = []
    for item in items[:real_limit]:
        if not isinstance(item, dict):
            LOGGER.warning("Skipping malformed Blockscout entry: %r", item)
            continue
        transactions.append(ExplorerTransaction.coerce(item))

    LOGGER.info("Fetched %d transactions from Blockscout", len(transactions))
    return transactions


def ingest_recent_transactions(limit: Optional[int] = None) -> Dict[str, Any]:
    """Fetch recent transactions and return each with its risk assessment plus a summary."""
    transactions = _fetch_transactions(limit)

    assessed: List[Dict[str, Any]] = []
    categories: Counter = Counter()
    flagged = 0
    for tx in transactions:
        assessment = assess_explorer_transaction(tx)
        categories[assessment.category.category] += 1
        if assessment.label == "BAD":
            flagged += 1
        assessed.append({
            "hash": tx.hash,
            "assessment": assessment.model_dump(by_alias=True),
        })

    LOGGER.info("Assessed %d transactions, %d flagged BAD", len(assessed), flagged)

    return {
        "fetched_count": len(transactions),
        "flagged_count": flagged,
        "categories": dict(categories),
        "transactions": assessed,
    }


__all__ = ["ingest_recent_transactions"]
