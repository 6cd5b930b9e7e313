import pytest
import requests

from txrisk.ingest import blockscout_ingest as ingest_module


class DummyResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        return self._payload


SCAM_ITEM = {
    "hash": "0xscam",
    "from": {"hash": "0x" + "1" * 40, "is_scam": True},
    "to": {"hash": "0x" + "2" * 40},
    "success": True,
    "value": "0",
}

USDC_ITEM = {
    "hash": "0xusdc",
    "from": {"hash": "0x" + "3" * 40},
    "to": {"hash": "0x" + "4" * 40, "name": "USDC"},
    "success": True,
    "gas_limit": "60000",
}


@pytest.fixture(autouse=True)
def blockscout_env(monkeypatch, fresh_settings):
    monkeypatch.setenv("BLOCKSCOUT_API_URL", "https://explorer.test/api/v2/")
    monkeypatch.delenv("TRANSACTION_FETCH_LIMIT", raising=False)
    fresh_settings.cache_clear()


def test_fetch_transactions_reads_items(monkeypatch):
    calls = {}

    def fake_get(url, **kwargs):
        calls["url"] = url
        calls["timeout"] = kwargs.get("timeout")
        return DummyResponse({"items": [SCAM_ITEM, USDC_ITEM, "garbage"], "next_page_params": None})

    monkeypatch.setattr(ingest_module.requests, "get", fake_get)

    result = ingest_module._fetch_transactions(10)

    assert calls["url"] == "https://explorer.test/api/v2/internal-transactions"
    assert calls["timeout"] == 30.0
    assert [tx.hash for tx in result] == ["0xscam", "0xusdc"]


def test_fetch_transactions_accepts_bare_list_and_limits(monkeypatch):
    monkeypatch.setattr(ingest_module.requests, "get", lambda *_, **__: DummyResponse([SCAM_ITEM, USDC_ITEM]))

    result = ingest_module._fetch_transactions(1)

    assert len(result) == 1
    assert result[0].hash == "0xscam"


def test_fetch_transactions_http_error(monkeypatch):
    monkeypatch.setattr(ingest_module.requests, "get", lambda *_, **__: DummyResponse({}, status_code=503))

    with pytest.raises(RuntimeError) as excinfo:
        ingest_module._fetch_transactions()

    assert "blockscout" in str(excinfo.value).lower()


def test_fetch_transactions_network_error(monkeypatch):
    def boom(*_args, **_kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(ingest_module.requests, "get", boom)

    with pytest.raises(RuntimeError):
        ingest_module._fetch_transactions()


def test_fetch_transactions_unexpected_payload(monkeypatch):
    monkeypatch.setattr(ingest_module.requests, "get", lambda *_, **__: DummyResponse({"message": "oops"}))

    with pytest.raises(RuntimeError) as excinfo:
        ingest_module._fetch_transactions()

    assert "unexpected" in str(excinfo.value).lower()


def test_ingest_recent_transactions_summarizes(monkeypatch):
    monkeypatch.setattr(
        ingest_module,
        "_fetch_transactions",
        lambda _limit: [ingest_module.ExplorerTransaction.coerce(item) for item in (SCAM_ITEM, USDC_ITEM)],
    )

    result = ingest_module.ingest_recent_transactions(5)

    assert result["fetched_count"] == 2
    assert result["flagged_count"] == 1
    assert result["categories"] == {"Malicious Activity": 1, "Stablecoin": 1}
    assert result["transactions"][0]["hash"] == "0xscam"
    assert result["transactions"][0]["assessment"]["category"]["riskLevel"] == "CRITICAL"


def test_recent_endpoint_maps_upstream_failure(client, monkeypatch):
    def failing(_limit):
        raise RuntimeError("Failed to fetch transactions from Blockscout")

    monkeypatch.setattr("txrisk.api.transactions.ingest_recent_transactions", failing)

    response = client.get("/transactions/recent?limit=5")
    assert response.status_code == 502


def test_recent_endpoint_success(client, monkeypatch):
    summary = {"fetched_count": 0, "flagged_count": 0, "categories": {}, "transactions": []}
    monkeypatch.setattr("txrisk.api.transactions.ingest_recent_transactions", lambda _limit: summary)

    response = client.get("/transactions/recent")
    assert response.status_code == 200
    assert response.json()["data"] == summary


def test_internal_transaction_hash_is_recognised(monkeypatch):
    item = {"transaction_hash": "0xinternal", "type": "call", "success": True}
    monkeypatch.setattr(ingest_module.requests, "get", lambda *_, **__: DummyResponse({"items": [item]}))

    result = ingest_module._fetch_transactions(1)

    assert result[0].hash == "0xinternal"
