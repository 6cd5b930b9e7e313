import json

import pytest

from txrisk.ingest import sample_loader


def test_load_sample_transactions_classifies_bundled_fixtures():
    result = sample_loader.load_sample_transactions()

    assert result["transaction_count"] == 4
    assert result["labels"] == {"BAD": 4}
    names = [item["classification"]["name"] for item in result["classifications"]]
    assert names == ["Scam Token Hunter", "Approval Guardian", "Slippage Sentinel", "MEV Detective"]
    risks = [item["classification"]["riskAnalysis"]["risk"] for item in result["classifications"]]
    assert risks == [85, 60, 55, 55]


def test_load_sample_transactions_handles_untagged_records(tmp_path):
    sample = tmp_path / "sample.json"
    sample.write_text(json.dumps([
        {"hash": "0x1", "to": {"name": "USDC"}, "success": True},
        "not-a-record",
        {"hash": "0x2", "category": "MEV Sandwich Attack"},
    ]))

    result = sample_loader.load_sample_transactions(str(sample))

    assert result["transaction_count"] == 2
    assert result["labels"] == {"GOOD": 2}
    assert result["classifications"][0]["classification"]["category"]["category"] == "Stablecoin"
    assert result["classifications"][1]["classification"]["name"] == "MEV Detective"


def test_load_sample_transactions_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        sample_loader.load_sample_transactions(str(tmp_path / "missing.json"))


def test_load_sample_transactions_invalid_json(tmp_path):
    sample = tmp_path / "broken.json"
    sample.write_text("{not json")

    with pytest.raises(ValueError):
        sample_loader.load_sample_transactions(str(sample))


def test_load_sample_transactions_empty(tmp_path):
    sample = tmp_path / "empty.json"
    sample.write_text(json.dumps({"sample_transactions": []}))

    with pytest.raises(ValueError):
        sample_loader.load_sample_transactions(str(sample))


def test_sample_endpoint_success(client, monkeypatch):
    from txrisk.api import transactions as transactions_module

    sample_response = {
        "transaction_count": 4,
        "labels": {"BAD": 4},
        "classifications": [],
        "source": "sample",
    }

    async def fake_run_in_threadpool(func, *args, **kwargs):
        assert func is transactions_module.load_sample_transactions
        return sample_response

    monkeypatch.setattr(transactions_module, "run_in_threadpool", fake_run_in_threadpool)

    response = client.post("/transactions/sample")
    assert response.status_code == 200
    payload = response.json()
    assert payload["data"] == sample_response
    assert payload["message"] == "Sample dataset classified"


def test_sample_endpoint_missing_file(client, tmp_path):
    response = client.post("/transactions/sample", params={"path": str(tmp_path / "nope.json")})
    assert response.status_code == 404
