"""Database interfaces and a database assembled from state and block hash sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, TypeVar

from .bits import B160, B256
from .bytecode import Bytecode
from .state import Account, AccountInfo

_T = TypeVar("_T")


class Database(ABC):
    """Mutable source of accounts, code, storage and block hashes.

    Failures are raised as exceptions.
    """

    @abstractmethod
    def basic(self, address: B160) -> AccountInfo | None:
        """Basic account information, or None when the account is unknown."""

    @abstractmethod
    def code_by_hash(self, code_hash: B256) -> Bytecode:
        """Account code by its hash."""

    @abstractmethod
    def storage(self, address: B160, index: int) -> int:
        """Storage value of ``address`` at ``index``."""

    @abstractmethod
    def block_hash(self, number: int) -> B256:
        """Hash of the block with the given number."""


class DatabaseCommit(ABC):
    """Database that accepts state changes."""

    @abstractmethod
    def commit(self, changes: dict[B160, Account]) -> None:
        """Apply the changed accounts."""


class DatabaseRef(ABC):
    """Read-only source of accounts, code, storage and block hashes."""

    @abstractmethod
    def basic(self, address: B160) -> AccountInfo | None:
        """Basic account information, or None when the account is unknown."""

    @abstractmethod
    def code_by_hash(self, code_hash: B256) -> Bytecode:
        """Account code by its hash."""

    @abstractmethod
    def storage(self, address: B160, index: int) -> int:
        """Storage value of ``address`` at ``index``."""

    @abstractmethod
    def block_hash(self, number: int) -> B256:
        """Hash of the block with the given number."""


class RefDBWrapper(Database):
    """Presents a read-only database as a database."""

    def __init__(self, db: DatabaseRef) -> None:
        self.db = db

    def basic(self, address: B160) -> AccountInfo | None:
        return self.db.basic(address)

    def code_by_hash(self, code_hash: B256) -> Bytecode:
        return self.db.code_by_hash(code_hash)

    def storage(self, address: B160, index: int) -> int:
        return self.db.storage(address, index)

    def block_hash(self, number: int) -> B256:
        return self.db.block_hash(number)


class StateSource(ABC):
    """The account, code and storage part of a database."""

    @abstractmethod
    def basic(self, address: B160) -> AccountInfo | None:
        """Basic account information, or None when the account is unknown."""

    @abstractmethod
    def code_by_hash(self, code_hash: B256) -> Bytecode:
        """Account code by its hash."""

    @abstractmethod
    def storage(self, address: B160, index: int) -> int:
        """Storage value of ``address`` at ``index``."""


class BlockHashSource(ABC):
    """The block hash part of a database."""

    @abstractmethod
    def block_hash(self, number: int) -> B256:
        """Hash of the block with the given number."""


class ComponentKind(Enum):
    """Which component of a database failed."""

    STATE = "state"
    BLOCK_HASH = "block_hash"


class DatabaseComponentError(Exception):
    """A component raised; ``error`` holds what it raised."""

    def __init__(self, kind: ComponentKind, error: BaseException) -> None:
        super().__init__(f"{kind.value} component failed: {error}")
        self.kind = kind
        self.error = error


class DatabaseComponents(Database, DatabaseRef):
    """Database built from a state source and a block hash source."""

    def __init__(self, state: StateSource, block_hash: BlockHashSource) -> None:
        self.state = state
        self.block_hash_source = block_hash

    @staticmethod
    def _guard(kind: ComponentKind, call: Callable[[], _T]) -> _T:
        try:
            return call()
        except Exception as exc:
            raise DatabaseComponentError(kind, exc) from exc

    def basic(self, address: B160) -> AccountInfo | None:
        return self._guard(ComponentKind.STATE, lambda: self.state.basic(address))

    def code_by_hash(self, code_hash: B256) -> Bytecode:
        return self._guard(
            ComponentKind.STATE, lambda: self.state.code_by_hash(code_hash)
        )

    def storage(self, address: B160, index: int) -> int:
        return self._guard(
            ComponentKind.STATE, lambda: self.state.storage(address, index)
        )

    def block_hash(self, number: int) -> B256:
        return self._guard(
            ComponentKind.BLOCK_HASH,
            lambda: self.block_hash_source.block_hash(number),
        )