"""Utility helpers for classifying the bundled demo transactions."""
from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

from txrisk.engine.legacy import classify

LOGGER = logging.getLogger(__name__)

DEFAULT_SAMPLE_PATH = Path(__file__).resolve().parents[2] / "data" / "sample_transactions.json"


def _load_records(sample_path: Path) -> List[Dict[str, Any]]:
    with sample_path.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Sample file {sample_path} is not valid JSON") from exc

    if isinstance(payload, dict):
        raw_records = payload.get("sample_transactions", [])
    else:
        raw_records = payload

    if not isinstance(raw_records, list):
        raise ValueError("Sample file must contain a list of transactions")

    records: List[Dict[str, Any]] = []
    for entry in raw_records:
        if not isinstance(entry, dict):
            LOGGER.warning("Skipping malformed sample transaction %r", entry)
            continue
        records.append(entry)
    return records


def load_sample_transactions(sample_path: Optional[str] = None) -> Dict[str, Any]:
    """Classify the bundled demo transactions and return the results with summary counts."""
    path = Path(sample_path or DEFAULT_SAMPLE_PATH)

    if not path.exists():
        raise FileNotFoundError(f"Sample transaction file not found at {path}")

    records = _load_records(path)
    if not records:
        raise ValueError("No valid transactions were found in the sample file")

    classifications: List[Dict[str, Any]] = []
    labels: Counter = Counter()
    for record in records:
        result = classify(record)
        verdict = getattr(result, "risk_analysis", result)
        labels[verdict.label] += 1
        classifications.append({
            "hash": record.get("hash"),
            "classification": result.model_dump(by_alias=True),
        })

    LOGGER.info("Classified %d sample transactions from %s", len(classifications), path)

    return {
        "transaction_count": len(classifications),
        "labels": dict(labels),
        "classifications": classifications,
        "source": str(path),
    }


__all__ = ["load_sample_transactions"]
