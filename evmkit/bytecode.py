"""Contract bytecode together with its hash and analysis state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .bits import B256
from .jump_table import AnalysisData, ValidJumpAddress
from .utilities import KECCAK_EMPTY, keccak256

_CHECKED_PADDING = 33


@dataclass(frozen=True)
class RawState:
    """Bytecode as given, not yet padded or analysed."""


@dataclass(frozen=True)
class CheckedState:
    """Bytecode padded with zeros; ``length`` is the original length."""

    length: int


@dataclass(frozen=True)
class AnalysedState:
    """Bytecode with a computed jump table."""

    length: int
    jumptable: ValidJumpAddress


BytecodeState = Union[RawState, CheckedState, AnalysedState]


@dataclass(frozen=True)
class Bytecode:
    """Code bytes, their Keccak-256 hash and their analysis state."""

    bytecode: bytes
    hash: B256
    state: BytecodeState

    @classmethod
    def new(cls) -> "Bytecode":
        """Bytecode holding a single STOP opcode."""
        return cls(
            bytecode=b"\x00",
            hash=KECCAK_EMPTY,
            state=AnalysedState(0, ValidJumpAddress((AnalysisData.none(),), 0)),
        )

    @classmethod
    def new_raw(cls, bytecode: bytes) -> "Bytecode":
        """Raw bytecode, hashing it."""
        bytecode = bytes(bytecode)
        code_hash = keccak256(bytecode) if bytecode else KECCAK_EMPTY
        return cls(bytecode, code_hash, RawState())

    @classmethod
    def new_raw_with_hash(cls, bytecode: bytes, hash: B256) -> "Bytecode":
        """Raw bytecode with a hash the caller vouches for."""
        return cls(bytes(bytecode), B256(hash), RawState())

    @classmethod
    def new_checked(
        cls, bytecode: bytes, length: int, hash: B256 | None = None
    ) -> "Bytecode":
        """Checked bytecode; it must already end with STOP padding."""
        bytecode = bytes(bytecode)
        if hash is not None:
            code_hash = B256(hash)
        elif length == 0:
            code_hash = KECCAK_EMPTY
        else:
            code_hash = keccak256(bytecode)
        return cls(bytecode, code_hash, CheckedState(length))

    def is_empty(self) -> bool:
        """True when the original code has no bytes."""
        return len(self) == 0

    def __len__(self) -> int:
        if isinstance(self.state, RawState):
            return len(self.bytecode)
        return self.state.length

    def to_checked(self) -> "Bytecode":
        """Pad raw bytecode with zeros; other states are returned unchanged."""
        if not isinstance(self.state, RawState):
            return self
        length = len(self.bytecode)
        return Bytecode(
            self.bytecode + bytes(_CHECKED_PADDING), self.hash, CheckedState(length)
        )