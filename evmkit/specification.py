"""Hard fork identifiers and per-fork specifications."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class SpecId(IntEnum):
    """Hard forks in activation order."""

    FRONTIER = 0
    FRONTIER_THAWING = 1
    HOMESTEAD = 2
    DAO_FORK = 3
    TANGERINE = 4
    SPURIOUS_DRAGON = 5
    BYZANTIUM = 6
    CONSTANTINOPLE = 7
    PETERSBURG = 8
    ISTANBUL = 9
    MUIR_GLACIER = 10
    BERLIN = 11
    LONDON = 12
    ARROW_GLACIER = 13
    GRAY_GLACIER = 14
    MERGE = 15
    MERGE_EOF = 16
    LATEST = 17

    @classmethod
    def from_name(cls, name: str) -> "SpecId":
        """Look up a fork by its test-suite name; unknown names give LATEST."""
        return _NAMES.get(name, cls.LATEST)

    @classmethod
    def try_from_u8(cls, value: int) -> "SpecId | None":
        """The fork with this number, or None."""
        try:
            return cls(value)
        except ValueError:
            return None

    def enabled(self, other: "SpecId") -> bool:
        """True when this fork is ``other`` or later."""
        return self >= other


_NAMES = {
    "Frontier": SpecId.FRONTIER,
    "Homestead": SpecId.HOMESTEAD,
    "Tangerine": SpecId.TANGERINE,
    "Spurious": SpecId.SPURIOUS_DRAGON,
    "Byzantium": SpecId.BYZANTIUM,
    "Constantinople": SpecId.CONSTANTINOPLE,
    "Petersburg": SpecId.PETERSBURG,
    "Istanbul": SpecId.ISTANBUL,
    "MuirGlacier": SpecId.MUIR_GLACIER,
    "Berlin": SpecId.BERLIN,
    "London": SpecId.LONDON,
    "Merge": SpecId.MERGE,
    "MergeEOF": SpecId.MERGE_EOF,
}


class Spec:
    """A fork that changes EVM behaviour; subclasses fix ``SPEC_ID``."""

    SPEC_ID: ClassVar[SpecId]

    def enabled(self, spec_id: SpecId) -> bool:
        """True when this spec is ``spec_id`` or later."""
        return type(self).SPEC_ID >= spec_id


class FrontierSpec(Spec):
    SPEC_ID = SpecId.FRONTIER


class HomesteadSpec(Spec):
    SPEC_ID = SpecId.HOMESTEAD


class TangerineSpec(Spec):
    SPEC_ID = SpecId.TANGERINE


class SpuriousDragonSpec(Spec):
    SPEC_ID = SpecId.SPURIOUS_DRAGON


class ByzantiumSpec(Spec):
    SPEC_ID = SpecId.BYZANTIUM


class PetersburgSpec(Spec):
    SPEC_ID = SpecId.PETERSBURG


class IstanbulSpec(Spec):
    SPEC_ID = SpecId.ISTANBUL


class BerlinSpec(Spec):
    SPEC_ID = SpecId.BERLIN


class LondonSpec(Spec):
    SPEC_ID = SpecId.LONDON


class MergeSpec(Spec):
    SPEC_ID = SpecId.MERGE


class LatestSpec(Spec):
    SPEC_ID = SpecId.LATEST