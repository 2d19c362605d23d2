import pytest

from evmkit.bits import B160, B256, FromHexError, decode_hex, encode_hex


def test_zero_values():
    assert B256.zero() == bytes(32)
    assert B160.zero() == bytes(20)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        B256(bytes(31))
    with pytest.raises(ValueError):
        B160(bytes(21))


def test_int_rejected():
    with pytest.raises(TypeError):
        B256(32)


def test_from_int_places_big_endian_in_tail():
    assert B160.from_int(9) == bytes(19) + b"\x09"
    assert B160.from_int(0x0102) == bytes(18) + b"\x01\x02"


def test_from_int_overflow():
    with pytest.raises(OverflowError):
        B160.from_int(2**64)


def test_hex_round_trip():
    value = B256(bytes(range(32)))
    assert B256.from_hex(value.to_hex()) == value
    addr = B160(bytes(range(100, 120)))
    assert B160.from_hex(addr.to_hex()) == addr


def test_from_hex_without_prefix():
    addr = B160(bytes(range(20)))
    assert B160.from_hex(bytes(range(20)).hex()) == addr


def test_from_hex_uppercase():
    addr = B160(bytes(range(200, 220)))
    assert B160.from_hex(bytes(range(200, 220)).hex().upper()) == addr


def test_from_hex_wrong_length():
    with pytest.raises(ValueError):
        B256.from_hex("0x" + "00" * 31)


def test_invalid_character_index_with_prefix():
    with pytest.raises(FromHexError) as info:
        B256.from_hex("0x" + "g" + "0" * 63)
    assert info.value.character == "g"
    assert info.value.index == 2


def test_invalid_character_index_without_prefix():
    with pytest.raises(FromHexError) as info:
        B160.from_hex("00z" + "0" * 37)
    assert info.value.character == "z"
    assert info.value.index == 2


def test_conversions():
    addr = B160(bytes(range(1, 21)))
    wide = addr.to_b256()
    assert wide == bytes(12) + addr
    assert wide.to_b160() == addr


def test_to_b160_drops_leading_bytes():
    value = B256(bytes(range(32)))
    assert value.to_b160() == bytes(range(12, 32))


def test_encode_hex_leading_zero():
    assert encode_hex(b"\x0a\xbc", False) == "0x0abc"
    assert encode_hex(b"\x0a\xbc", True) == "0xabc"
    assert encode_hex(b"", False) == "0x"


def test_decode_hex_skips_whitespace():
    decoded = decode_hex("0x" + "ab" * 31 + "  ", 32)
    assert decoded == b"\xab" * 31 + b"\x00"


def test_repr_contains_hex():
    assert B160.zero().to_hex() in repr(B160.zero())