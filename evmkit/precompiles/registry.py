"""Sets of precompiled contracts active at each hard fork."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Iterable, Mapping

from ..bits import B160
from ..log import Log
from ..precompile import PrecompileResult, StandardPrecompileFn
from . import blake2, bn128, hashes, identity, secp256k1


class PrecompileSpec(IntEnum):
    """Forks that change the set of precompiles."""

    HOMESTEAD = 0
    BYZANTIUM = 1
    ISTANBUL = 2
    BERLIN = 3
    LATEST = 4

    def enabled(self, spec_id: int) -> bool:
        """True when ``spec_id`` is this fork or later."""
        return spec_id >= self


class PrecompileKind(Enum):
    """Whether a precompile is built in or supplied by the user."""

    STANDARD = "Standard"
    CUSTOM = "Custom"


@dataclass(frozen=True, repr=False)
class Precompile:
    """A precompiled contract: call it with input bytes and a gas limit."""

    kind: PrecompileKind
    function: StandardPrecompileFn

    def __call__(self, input: bytes, gas_limit: int) -> PrecompileResult:
        return self.function(input, gas_limit)

    def __repr__(self) -> str:
        return self.kind.value


@dataclass
class PrecompileOutput:
    """Cost, output and logs of a precompile call."""

    cost: int
    output: bytes
    logs: list[Log] = field(default_factory=list)

    @classmethod
    def without_logs(cls, cost: int, output: bytes) -> "PrecompileOutput":
        """Output with no logs."""
        return cls(cost, bytes(output))


def _standard(number: int, function: StandardPrecompileFn) -> tuple[B160, Precompile]:
    return B160.from_int(number), Precompile(PrecompileKind.STANDARD, function)


_CACHE: dict[PrecompileSpec, "Precompiles"] = {}


def _cached(
    spec: PrecompileSpec, build: Callable[[], "Precompiles"]
) -> "Precompiles":
    instance = _CACHE.get(spec)
    if instance is None:
        instance = _CACHE[spec] = build()
    return instance


class Precompiles:
    """Precompiled contracts keyed by address.

    Built with no mapping, it holds the latest fork's set.
    """

    def __init__(self, fun: Mapping[B160, Precompile] | None = None) -> None:
        source = fun if fun is not None else Precompiles.latest().fun
        self.fun: dict[B160, Precompile] = dict(source)

    @classmethod
    def _extended(
        cls, base: "Precompiles", entries: Iterable[tuple[B160, Precompile]]
    ) -> "Precompiles":
        fun = dict(base.fun)
        fun.update(entries)
        return cls(fun)

    @classmethod
    def homestead(cls) -> "Precompiles":
        """ECRECOVER, SHA-256, RIPEMD-160 and identity."""
        return _cached(
            PrecompileSpec.HOMESTEAD,
            lambda: cls(
                dict(
                    [
                        _standard(1, secp256k1.ec_recover_run),
                        _standard(2, hashes.sha256_run),
                        _standard(3, hashes.ripemd160_run),
                        _standard(4, identity.identity_run),
                    ]
                )
            ),
        )

    @classmethod
    def byzantium(cls) -> "Precompiles":
        """Homestead plus alt_bn128 addition, multiplication and pairing."""
        return _cached(
            PrecompileSpec.BYZANTIUM,
            lambda: cls._extended(
                cls.homestead(),
                [
                    _standard(6, bn128.add_byzantium),
                    _standard(7, bn128.mul_byzantium),
                    _standard(8, bn128.pair_byzantium),
                ],
            ),
        )

    @classmethod
    def istanbul(cls) -> "Precompiles":
        """Byzantium plus BLAKE2 F, with cheaper alt_bn128 operations."""
        return _cached(
            PrecompileSpec.ISTANBUL,
            lambda: cls._extended(
                cls.byzantium(),
                [
                    _standard(9, blake2.run),
                    _standard(6, bn128.add_istanbul),
                    _standard(7, bn128.mul_istanbul),
                    _standard(8, bn128.pair_istanbul),
                ],
            ),
        )

    @classmethod
    def berlin(cls) -> "Precompiles":
        """The Berlin set."""
        return _cached(
            PrecompileSpec.BERLIN,
            lambda: cls._extended(cls.istanbul(), []),
        )

    @classmethod
    def latest(cls) -> "Precompiles":
        """The newest set."""
        return cls.berlin()

    @classmethod
    def for_spec(cls, spec: PrecompileSpec) -> "Precompiles":
        """The set active at ``spec``."""
        builders = {
            PrecompileSpec.HOMESTEAD: cls.homestead,
            PrecompileSpec.BYZANTIUM: cls.byzantium,
            PrecompileSpec.ISTANBUL: cls.istanbul,
            PrecompileSpec.BERLIN: cls.berlin,
            PrecompileSpec.LATEST: cls.latest,
        }
        return builders[PrecompileSpec(spec)]()

    def addresses(self) -> Iterable[B160]:
        """Addresses of the precompiles."""
        return self.fun.keys()

    def __contains__(self, address: object) -> bool:
        return address in self.fun

    def get(self, address: B160) -> Precompile | None:
        """The precompile at ``address``, or None."""
        return self.fun.get(address)

    def is_empty(self) -> bool:
        """True when there are no precompiles."""
        return not self.fun

    def __len__(self) -> int:
        return len(self.fun)