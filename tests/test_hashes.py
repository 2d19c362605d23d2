import hashlib

import pytest
from Crypto.Hash import RIPEMD160

from evmkit.precompile import PrecompileError, PrecompileErrorKind
from evmkit.precompiles.hashes import ripemd160_run, sha256_run


def test_sha256_empty_input():
    gas, out = sha256_run(b"", 1_000)
    assert gas == 60
    assert out.hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("data", [b"abc", bytes(33), bytes(range(256))])
def test_sha256_matches_hashlib(data):
    _, out = sha256_run(data, 10_000)
    assert out == hashlib.sha256(data).digest()


def test_sha256_cost_per_word():
    one, _ = sha256_run(b"x", 10_000)
    full, _ = sha256_run(bytes(32), 10_000)
    more, _ = sha256_run(bytes(33), 10_000)
    assert one == full
    assert more - full == 12


def test_sha256_out_of_gas():
    cost, _ = sha256_run(bytes(64), 10_000)
    with pytest.raises(PrecompileError) as info:
        sha256_run(bytes(64), cost - 1)
    assert info.value.kind is PrecompileErrorKind.OUT_OF_GAS


def test_ripemd160_padded_digest():
    gas, out = ripemd160_run(b"abc", 10_000)
    assert len(out) == 32
    assert out[:12] == bytes(12)
    assert out[12:] == RIPEMD160.new(data=b"abc").digest()
    assert gas == 600 + 120


def test_ripemd160_empty_cost_is_base():
    gas, _ = ripemd160_run(b"", 600)
    assert gas == 600


def test_ripemd160_out_of_gas():
    with pytest.raises(PrecompileError) as info:
        ripemd160_run(b"", 599)
    assert info.value.kind is PrecompileErrorKind.OUT_OF_GAS