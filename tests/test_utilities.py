import pytest

from evmkit.bits import B160, B256
from evmkit.utilities import (
    KECCAK_EMPTY,
    create2_address,
    create_address,
    decode_hex_bytes,
    encode_hex_bytes,
    keccak256,
)


def test_keccak_of_empty_matches_constant():
    assert keccak256(b"") == KECCAK_EMPTY


def test_keccak_empty_hex():
    assert (
        KECCAK_EMPTY.to_hex()
        == "0xc5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_keccak_returns_b256():
    digest = keccak256(b"abc")
    assert isinstance(digest, B256) and len(digest) == 32
    assert keccak256(b"abc") == digest


def test_create_address_known_vector():
    caller = B160.from_hex("0x6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0")
    assert create_address(caller, 0) == B160.from_hex(
        "0xcd234a471b72ba2f1ccf0a70fcaba648a5eecd8d"
    )


def test_create_address_depends_on_nonce():
    caller = B160.from_int(1)
    addresses = {create_address(caller, n) for n in (0, 1, 127, 128, 2**64 - 1)}
    assert len(addresses) == 5


def test_create_address_rejects_large_nonce():
    with pytest.raises(ValueError):
        create_address(B160.zero(), 2**64)


def test_create2_known_vector():
    code_hash = keccak256(b"\x00")
    assert create2_address(B160.zero(), code_hash, 0) == B160.from_hex(
        "0x4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38"
    )


def test_create2_depends_on_salt():
    code_hash = keccak256(b"\x00")
    first = create2_address(B160.zero(), code_hash, 0)
    second = create2_address(B160.zero(), code_hash, 1)
    assert len({first, second}) == 2


def test_hex_bytes_round_trip():
    data = bytes(range(256))
    encoded = encode_hex_bytes(data)
    assert encoded.startswith("0x")
    assert decode_hex_bytes(encoded) == data


def test_decode_hex_bytes_without_prefix():
    assert decode_hex_bytes("0102ff") == b"\x01\x02\xff"


def test_decode_hex_bytes_invalid():
    with pytest.raises(ValueError):
        decode_hex_bytes("0xzz")
    with pytest.raises(ValueError):
        decode_hex_bytes("0x123")