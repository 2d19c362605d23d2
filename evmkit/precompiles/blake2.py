"""The BLAKE2b compression function ``F`` precompile."""

from __future__ import annotations

import struct
from typing import Sequence

from ..precompile import PrecompileError, PrecompileErrorKind, PrecompileResult

F_ROUND = 1
"""Gas charged per round."""
INPUT_LENGTH = 213

_MASK = (1 << 64) - 1

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)
"""Message word permutation for each round."""

IV = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)
"""BLAKE2b initialisation vector."""

# State indices mixed by G: four columns, then four diagonals.
_MIXES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & _MASK


def _g(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    v[a] = (v[a] + v[b] + x) & _MASK
    v[d] = _rotr(v[d] ^ v[a], 32)
    v[c] = (v[c] + v[d]) & _MASK
    v[b] = _rotr(v[b] ^ v[c], 24)
    v[a] = (v[a] + v[b] + y) & _MASK
    v[d] = _rotr(v[d] ^ v[a], 16)
    v[c] = (v[c] + v[d]) & _MASK
    v[b] = _rotr(v[b] ^ v[c], 63)


def compress(
    rounds: int,
    h: Sequence[int],
    m: Sequence[int],
    t: Sequence[int],
    f: bool,
) -> list[int]:
    """Apply ``rounds`` rounds of F to state ``h``; returns the new state."""
    if len(h) != 8 or len(m) != 16 or len(t) != 2:
        raise ValueError("compress needs 8 state words, 16 message words, 2 counters")
    v = [word & _MASK for word in h] + list(IV)
    v[12] ^= t[0] & _MASK
    v[13] ^= t[1] & _MASK
    if f:
        v[14] ^= _MASK
    for i in range(rounds):
        s = SIGMA[i % 10]
        for k, (a, b, c, d) in enumerate(_MIXES):
            _g(v, a, b, c, d, m[s[2 * k]], m[s[2 * k + 1]])
    return [hw ^ lo ^ hi for hw, lo, hi in zip(h, v[:8], v[8:])]


def run(input: bytes, gas_limit: int) -> PrecompileResult:
    """Run F on ``rounds | h | m | t0 | t1 | f`` encoded input of 213 bytes."""
    data = bytes(input)
    if len(data) != INPUT_LENGTH:
        raise PrecompileError(PrecompileErrorKind.BLAKE2_WRONG_LENGTH)
    flag = data[212]
    if flag not in (0, 1):
        raise PrecompileError(PrecompileErrorKind.BLAKE2_WRONG_FINAL_INDICATOR_FLAG)

    (rounds,) = struct.unpack(">I", data[:4])
    gas_used = rounds * F_ROUND
    if gas_used > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)

    h = struct.unpack("<8Q", data[4:68])
    m = struct.unpack("<16Q", data[68:196])
    t = struct.unpack("<2Q", data[196:212])
    state = compress(rounds, h, m, t, flag == 1)
    return gas_used, struct.pack("<8Q", *state)