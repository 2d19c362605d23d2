from evmkit.bytecode import AnalysedState, Bytecode, CheckedState, RawState
from evmkit.utilities import KECCAK_EMPTY, keccak256


def test_new_is_single_stop():
    code = Bytecode.new()
    assert code.bytecode == b"\x00"
    assert code.hash == KECCAK_EMPTY
    assert isinstance(code.state, AnalysedState)
    assert len(code) == 0
    assert code.is_empty()
    assert not code.state.jumptable.is_valid(0)


def test_new_raw_empty_uses_empty_hash():
    code = Bytecode.new_raw(b"")
    assert code.hash == KECCAK_EMPTY
    assert code.state == RawState()
    assert code.is_empty()


def test_new_raw_hashes_code():
    code = Bytecode.new_raw(b"\x60\x01\x00")
    assert code.hash == keccak256(b"\x60\x01\x00")
    assert len(code) == 3
    assert not code.is_empty()


def test_new_raw_with_hash_keeps_hash():
    fake = keccak256(b"other")
    code = Bytecode.new_raw_with_hash(b"\x01", fake)
    assert code.hash == fake
    assert code.state == RawState()


def test_to_checked_pads():
    raw = Bytecode.new_raw(b"\x60\x01")
    checked = raw.to_checked()
    assert checked.bytecode == b"\x60\x01" + bytes(33)
    assert checked.state == CheckedState(2)
    assert checked.hash == raw.hash
    assert len(checked) == 2


def test_to_checked_idempotent():
    checked = Bytecode.new_raw(b"\x01").to_checked()
    assert checked.to_checked() is checked
    analysed = Bytecode.new()
    assert analysed.to_checked() is analysed


def test_new_checked_hash_rules():
    assert Bytecode.new_checked(bytes(33), 0).hash == KECCAK_EMPTY
    padded = b"\x01" + bytes(33)
    assert Bytecode.new_checked(padded, 1).hash == keccak256(padded)
    given = keccak256(b"\x01")
    assert Bytecode.new_checked(padded, 1, given).hash == given


def test_checked_length_from_state():
    code = Bytecode.new_checked(b"\x01\x02" + bytes(33), 2)
    assert len(code) == 2
    assert not code.is_empty()
    assert Bytecode.new_checked(bytes(33), 0).is_empty()