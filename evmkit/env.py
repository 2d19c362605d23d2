"""Configuration, block and transaction environment of an execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .bits import B160, B256
from .specification import SpecId

_U256_MAX = (1 << 256) - 1
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class CreateScheme:
    """``CREATE`` when ``salt`` is None, otherwise ``CREATE2`` with that salt."""

    salt: int | None = None

    @classmethod
    def create(cls) -> "CreateScheme":
        """The legacy ``CREATE`` scheme."""
        return cls()

    @classmethod
    def create2(cls, salt: int) -> "CreateScheme":
        """The ``CREATE2`` scheme with a 256-bit salt."""
        if not 0 <= salt <= _U256_MAX:
            raise ValueError(f"salt out of u256 range: {salt}")
        return cls(salt)

    def is_create2(self) -> bool:
        """True for the ``CREATE2`` scheme."""
        return self.salt is not None


@dataclass(frozen=True)
class TransactTo:
    """Target of a transaction: a call to ``address`` or a contract creation."""

    address: B160 | None = None
    scheme: CreateScheme | None = None

    @classmethod
    def call(cls, address: B160) -> "TransactTo":
        """Call the given address."""
        return cls(address=B160(address))

    @classmethod
    def create(cls, scheme: CreateScheme | None = None) -> "TransactTo":
        """Create a contract; the default scheme is ``CREATE``."""
        return cls(scheme=scheme if scheme is not None else CreateScheme.create())

    def is_create(self) -> bool:
        """True when the transaction creates a contract."""
        return self.scheme is not None


class AnalysisKind(Enum):
    """How created bytecode is prepared."""

    RAW = "raw"
    CHECK = "check"
    ANALYSE = "analyse"


@dataclass
class CfgEnv:
    """Chain configuration and execution switches."""

    chain_id: int = 1
    spec_id: SpecId = SpecId.LATEST
    perf_all_precompiles_have_balance: bool = False
    perf_analyse_created_bytecodes: AnalysisKind = AnalysisKind.ANALYSE
    limit_contract_code_size: int | None = None
    memory_limit: int = 2**32 - 1
    disable_balance_check: bool = False
    disable_block_gas_limit: bool = False
    disable_eip3607: bool = False
    disable_gas_refund: bool = False


@dataclass
class BlockEnv:
    """Properties of the block being executed."""

    number: int = 0
    coinbase: B160 = field(default_factory=B160.zero)
    timestamp: int = 1
    difficulty: int = 0
    prevrandao: B256 | None = field(default_factory=B256.zero)
    basefee: int = 0
    gas_limit: int = _U256_MAX


@dataclass
class TxEnv:
    """Properties of the transaction being executed."""

    caller: B160 = field(default_factory=B160.zero)
    gas_limit: int = _U64_MAX
    gas_price: int = 0
    gas_priority_fee: int | None = None
    transact_to: TransactTo = field(
        default_factory=lambda: TransactTo.call(B160.zero())
    )
    value: int = 0
    data: bytes = b""
    chain_id: int | None = None
    nonce: int | None = None
    access_list: list[tuple[B160, list[int]]] = field(default_factory=list)


@dataclass
class Env:
    """The complete execution environment."""

    cfg: CfgEnv = field(default_factory=CfgEnv)
    block: BlockEnv = field(default_factory=BlockEnv)
    tx: TxEnv = field(default_factory=TxEnv)

    def effective_gas_price(self) -> int:
        """Gas price, capped by basefee plus priority fee when one is set."""
        if self.tx.gas_priority_fee is None:
            return self.tx.gas_price
        return min(self.tx.gas_price, self.block.basefee + self.tx.gas_priority_fee)