import pytest

from txrisk.engine.explorer_risk import assess_explorer_transaction, risk_level_for_score


@pytest.mark.parametrize(
    "risk, level",
    [(0, "LOW"), (19, "LOW"), (20, "MODERATE"), (39, "MODERATE"), (40, "HIGH"), (59, "HIGH"), (60, "CRITICAL"), (99, "CRITICAL")],
)
def test_risk_level_bands(risk, level):
    assert risk_level_for_score(risk) == level


def test_scam_contract_assessment():
    tx = {
        "hash": "0xscam",
        "from": {"hash": "0x" + "a" * 40, "is_contract": True, "is_verified": False},
        "to": {"hash": "0x" + "b" * 40, "is_scam": True},
        "success": True,
        "gas_limit": "600000",
        "value": "1000",
    }
    assessment = assess_explorer_transaction(tx)

    assert assessment.reasons == [
        "Scam contract detected",
        "High gas usage",
        "Unverified source contract",
        "Value transfer",
    ]
    assert assessment.risk == 120
    assert assessment.label == "BAD"
    assert assessment.level == "CRITICAL"
    assert assessment.category.category == "Malicious Activity"


def test_delegatecall_through_router():
    tx = {
        "from": {"name": "1inch Router"},
        "to": {"is_contract": True, "is_verified": False},
        "success": False,
        "type": "delegatecall",
        "gas_limit": 250000,
    }
    assessment = assess_explorer_transaction(tx)

    assert assessment.reasons == [
        "Failed transaction",
        "Moderate gas usage",
        "Unverified target contract",
        "Delegate call (potential proxy risk)",
        "Router interaction",
    ]
    assert assessment.risk == 75
    assert assessment.label == "BAD"
    assert assessment.category.category == "Failed Transaction"


def test_plain_transfer_is_low_risk():
    tx = {
        "success": True,
        "gas_limit": "21000",
        "gas_price": "5000000000",
        "value": "0",
    }
    assessment = assess_explorer_transaction(tx)

    assert assessment.risk == 0
    assert assessment.label == "GOOD"
    assert assessment.level == "LOW"
    assert assessment.reasons == []
    assert assessment.category.category == "Gas Optimization"


def test_assessment_tolerates_garbage_numbers():
    assessment = assess_explorer_transaction({"gas_limit": "lots", "value": "n/a"})
    assert assessment.risk == 0
    assert assessment.category.category == "Standard Current"


def test_delegatecall_type_is_case_sensitive():
    assessment = assess_explorer_transaction({"type": "DELEGATECALL", "success": True})
    assert "Delegate call (potential proxy risk)" not in assessment.reasons
