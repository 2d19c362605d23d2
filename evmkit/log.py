"""Event log emitted by contract execution."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bits import B160, B256


@dataclass(frozen=True)
class Log:
    """A log entry: emitting address, indexed topics and data."""

    address: B160
    topics: tuple[B256, ...] = field(default_factory=tuple)
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", B160(self.address))
        object.__setattr__(self, "topics", tuple(B256(t) for t in self.topics))
        object.__setattr__(self, "data", bytes(self.data))