from txrisk.engine.system_detector import (
    L1_BLOCK_ADDRESS,
    SYSTEM_DEPOSITOR_ADDRESS,
    is_system_transaction,
)


def test_reserved_target_address_is_case_insensitive():
    assert is_system_transaction({"to": {"hash": L1_BLOCK_ADDRESS.upper().replace("0X", "0x")}})


def test_reserved_sender_address():
    assert is_system_transaction({"from": {"hash": SYSTEM_DEPOSITOR_ADDRESS}})
    assert is_system_transaction({"from": SYSTEM_DEPOSITOR_ADDRESS})


def test_system_methods():
    assert is_system_transaction({"decoded_input": {"method_call": "setL1BlockValues(uint64 number)"}})
    assert is_system_transaction({"decoded_input": {"method_call": "transmit(bytes32[3],bytes,bytes32[],bytes32[],bytes32)"}})
    assert not is_system_transaction({"decoded_input": {"method_call": "transmitter()"}})


def test_system_type_requires_zero_gas_price():
    assert is_system_transaction({"type": 126, "gas_price": "0"})
    assert is_system_transaction({"type": "126", "gas_price": 0})
    assert not is_system_transaction({"type": 126})
    assert not is_system_transaction({"type": 126, "gas_price": "1"})
    assert not is_system_transaction({"type": 2, "gas_price": "0"})


def test_ordinary_transaction_is_not_system():
    tx = {
        "from": {"hash": "0x" + "1" * 40},
        "to": {"hash": "0x" + "2" * 40, "name": "USDC"},
        "decoded_input": {"method_call": "transfer(address to, uint256 value)"},
        "gas_price": "12000000000",
    }
    assert not is_system_transaction(tx)
    assert not is_system_transaction({})
