"""Hashing, contract address derivation and hex helpers."""

from __future__ import annotations

import binascii

from Crypto.Hash import keccak

from .bits import B160, B256

KECCAK_EMPTY = B256.from_hex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)

_U64_LIMIT = 1 << 64


def keccak256(data: bytes) -> B256:
    """Keccak-256 digest of ``data``."""
    return B256(keccak.new(digest_bits=256, data=bytes(data)).digest())


def _rlp_length_prefix(length: int, offset: int) -> bytes:
    if length < 56:
        return bytes([offset + length])
    encoded = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([offset + 55 + len(encoded)]) + encoded


def _rlp_string(data: bytes) -> bytes:
    if len(data) == 1 and data[0] < 0x80:
        return data
    return _rlp_length_prefix(len(data), 0x80) + data


def _rlp_list(items: list[bytes]) -> bytes:
    payload = b"".join(items)
    return _rlp_length_prefix(len(payload), 0xC0) + payload


def create_address(caller: B160, nonce: int) -> B160:
    """Address of a contract made with ``CREATE``."""
    if not 0 <= nonce < _U64_LIMIT:
        raise ValueError(f"nonce out of u64 range: {nonce}")
    nonce_bytes = nonce.to_bytes((nonce.bit_length() + 7) // 8, "big")
    encoded = _rlp_list([_rlp_string(bytes(B160(caller))), _rlp_string(nonce_bytes)])
    return B160(keccak256(encoded)[12:])


def create2_address(caller: B160, code_hash: B256, salt: int) -> B160:
    """Address of a contract made with ``CREATE2``."""
    preimage = (
        b"\xff" + bytes(B160(caller)) + salt.to_bytes(32, "big") + bytes(B256(code_hash))
    )
    return B160(keccak256(preimage)[12:])


def encode_hex_bytes(data: bytes) -> str:
    """Encode bytes as a ``0x``-prefixed hex string."""
    return "0x" + bytes(data).hex()


def decode_hex_bytes(text: str) -> bytes:
    """Decode a hex string, with or without ``0x``; raises ValueError on bad input."""
    digits = text[2:] if text.startswith("0x") else text
    try:
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(str(exc)) from exc