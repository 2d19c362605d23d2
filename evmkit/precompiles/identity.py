"""The identity precompile: returns its input unchanged."""

from __future__ import annotations

from ..precompile import PrecompileError, PrecompileErrorKind, PrecompileResult
from .cost import calc_linear_cost

IDENTITY_BASE = 15
"""Base cost of the operation."""
IDENTITY_PER_WORD = 3
"""Cost per 32-byte word."""


def identity_run(input: bytes, gas_limit: int) -> PrecompileResult:
    """Copy the input to the output."""
    gas_used = calc_linear_cost(len(input), IDENTITY_BASE, IDENTITY_PER_WORD)
    if gas_used > gas_limit:
        raise PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    return gas_used, bytes(input)