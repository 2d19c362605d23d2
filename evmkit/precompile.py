"""Result and error types shared by precompiled contracts."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple

PrecompileResult = Tuple[int, bytes]
"""Gas used and output bytes of a successful precompile call."""

StandardPrecompileFn = Callable[[bytes, int], PrecompileResult]
CustomPrecompileFn = Callable[[bytes, int], PrecompileResult]


class PrecompileErrorKind(Enum):
    """Reasons a precompile call fails."""

    OUT_OF_GAS = "out of gas"
    BLAKE2_WRONG_LENGTH = "blake2 input has wrong length"
    BLAKE2_WRONG_FINAL_INDICATOR_FLAG = "blake2 final indicator flag is not 0 or 1"
    MODEXP_EXP_OVERFLOW = "modexp exponent length overflow"
    MODEXP_BASE_OVERFLOW = "modexp base length overflow"
    MODEXP_MOD_OVERFLOW = "modexp modulus length overflow"
    BN128_FIELD_POINT_NOT_A_MEMBER = "bn128 field point is not a member"
    BN128_AFFINE_G_FAILED_TO_CREATE = "bn128 point is not on the curve"
    BN128_PAIR_LENGTH = "bn128 pairing input has wrong length"


class PrecompileError(Exception):
    """A precompile call failed for the given reason."""

    def __init__(self, kind: PrecompileErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecompileError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"PrecompileError({self.kind.name})"