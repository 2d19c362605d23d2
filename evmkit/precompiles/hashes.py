"""SHA-256 and RIPEMD-160 precompiles."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160

from ..precompile import PrecompileError, PrecompileErrorKind, PrecompileResult
from .cost import calc_linear_cost

SHA256_BASE = 60
SHA256_PER_WORD = 12
RIPEMD160_BASE = 600
RIPEMD160_PER_WORD = 120


def sha256_run(input: bytes, gas_limit: int) -> PrecompileResult:
    """SHA-256 digest of the input."""
    cost = calc_linear_cost(len(input), SHA256_BASE, SHA256_PER_WORD)
    if cost > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    return cost, hashlib.sha256(bytes(input)).digest()


def ripemd160_run(input: bytes, gas_limit: int) -> PrecompileResult:
    """RIPEMD-160 digest of the input, left-padded with zeros to 32 bytes."""
    gas_used = calc_linear_cost(len(input), RIPEMD160_BASE, RIPEMD160_PER_WORD)
    if gas_used > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    digest = RIPEMD160.new(data=bytes(input)).digest()
    return gas_used, bytes(12) + digest