"""Jump destination and gas block analysis of bytecode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

JUMP_MASK = 0x80000000
_U32_LIMIT = 1 << 32


class Analysis(Enum):
    """Kind of an analysed opcode position."""

    JUMP_DEST = "jump_dest"
    GAS_BLOCK_END = "gas_block_end"
    NONE = "none"


@dataclass
class AnalysisData:
    """Packs a jump flag (top bit) and a 31-bit gas block into one u32."""

    is_jump_and_gas_block: int = 0

    @classmethod
    def none(cls) -> "AnalysisData":
        """No jump and zero gas block."""
        return cls(0)

    def set_is_jump(self) -> None:
        """Mark the position as a valid jump destination."""
        self.is_jump_and_gas_block |= JUMP_MASK

    def set_gas_block(self, gas_block: int) -> None:
        """Replace the gas block, keeping the jump flag."""
        if not 0 <= gas_block < _U32_LIMIT:
            raise ValueError(f"gas block out of u32 range: {gas_block}")
        jump = self.is_jump_and_gas_block & JUMP_MASK
        self.is_jump_and_gas_block = gas_block | jump

    def is_jump(self) -> bool:
        """True when the jump flag is set."""
        return self.is_jump_and_gas_block & JUMP_MASK == JUMP_MASK

    def gas_block(self) -> int:
        """The gas block without the jump flag."""
        return self.is_jump_and_gas_block & ~JUMP_MASK & (_U32_LIMIT - 1)


@dataclass(frozen=True)
class ValidJumpAddress:
    """Per-position analysis of a piece of code."""

    analysis: tuple[AnalysisData, ...]
    first_gas_block: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "analysis", tuple(self.analysis))

    def __len__(self) -> int:
        return len(self.analysis)

    def is_empty(self) -> bool:
        """True when no position was analysed."""
        return len(self) == 0

    def is_valid(self, position: int) -> bool:
        """True when ``position`` is a valid jump destination."""
        if not 0 <= position < len(self.analysis):
            return False
        return self.analysis[position].is_jump()

    def gas_block(self, position: int) -> int:
        """Gas block at ``position``; raises IndexError outside the code."""
        if position < 0:
            raise IndexError(f"position out of range: {position}")
        return self.analysis[position].gas_block()