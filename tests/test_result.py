import pytest

from evmkit.bits import B160, B256
from evmkit.log import Log
from evmkit.result import (
    CallOutput,
    CreateOutput,
    DatabaseError,
    EVMError,
    Eval,
    Halt,
    Halted,
    InvalidTransaction,
    PrevrandaoNotSet,
    ResultAndState,
    Revert,
    Success,
    TransactionError,
)
from evmkit.state import Account


def _log():
    return Log(B160.from_int(1), (B256.zero(),), b"\x01")


def test_success_reports_logs_and_gas():
    log = _log()
    result = Success(Eval.RETURN, 21000, 10, [log], CallOutput(b"\x02"))
    assert result.is_success() is True
    assert result.logs() == [log]
    assert result.gas_used == 21000
    assert result.output.data == b"\x02"


def test_logs_returns_a_copy():
    result = Success(Eval.STOP, 1, 0, [_log()], CallOutput())
    result.logs().clear()
    assert len(result.logs()) == 1


def test_revert_has_no_logs():
    result = Revert(gas_used=500, output=b"\xff")
    assert result.is_success() is False
    assert result.logs() == []
    assert result.gas_used == 500


def test_halt_has_no_logs():
    result = Halted(Halt.OUT_OF_GAS, 30000)
    assert result.is_success() is False
    assert result.logs() == []
    assert result.gas_used == 30000
    assert result.reason is Halt.OUT_OF_GAS


def test_create_output_address():
    address = B160.from_int(9)
    assert CreateOutput(b"", address).address == address
    assert CreateOutput(b"").address is None


def test_result_and_state():
    state = {B160.from_int(1): Account.new_not_existing()}
    bundle = ResultAndState(Revert(3), state)
    assert bundle.state[B160.from_int(1)].is_not_existing is True
    assert bundle.result == Revert(3)


def test_transaction_error_is_raised_and_compared():
    with pytest.raises(EVMError) as info:
        raise TransactionError(InvalidTransaction.REJECT_CALLER_WITH_CODE)
    assert info.value.reason is InvalidTransaction.REJECT_CALLER_WITH_CODE
    assert info.value == TransactionError(InvalidTransaction.REJECT_CALLER_WITH_CODE)
    assert info.value != TransactionError(InvalidTransaction.NONCE_OVERFLOW_IN_TRANSACTION)


def test_database_error_keeps_error():
    error = DatabaseError("missing")
    assert error.error == "missing"
    assert error == DatabaseError("missing")
    assert error != PrevrandaoNotSet()


def test_prevrandao_errors_equal():
    error = PrevrandaoNotSet()
    assert error == PrevrandaoNotSet()
    assert (error == DatabaseError("missing")) is False