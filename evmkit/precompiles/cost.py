"""Gas cost helpers shared by precompiled contracts."""

from __future__ import annotations

_WORD_SIZE = 32


def calc_linear_cost(length: int, base: int, word: int) -> int:
    """Base cost plus ``word`` for every started 32-byte word of input."""
    return (length + _WORD_SIZE - 1) // _WORD_SIZE * word + base