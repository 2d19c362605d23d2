"""Account, account information and storage slot state."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bits import B160, B256
from .bytecode import Bytecode
from .utilities import KECCAK_EMPTY


@dataclass
class StorageSlot:
    """A storage value as first loaded and as it is now."""

    original_value: int = 0
    present_value: int = 0

    @classmethod
    def new(cls, original: int) -> "StorageSlot":
        """Slot whose present value equals its original value."""
        return cls(original, original)

    def is_changed(self) -> bool:
        """True when the present value differs from the original value."""
        return self.original_value != self.present_value


@dataclass(eq=False)
class AccountInfo:
    """Balance, nonce and code of an account.

    ``code`` may be None, in which case it is fetched by ``code_hash``.
    """

    balance: int = 0
    nonce: int = 0
    code_hash: B256 = KECCAK_EMPTY
    code: Bytecode | None = field(default_factory=Bytecode.new)

    @classmethod
    def from_code(cls, balance: int, nonce: int, code: Bytecode) -> "AccountInfo":
        """Account information taking its hash from ``code``."""
        return cls(balance=balance, nonce=nonce, code_hash=code.hash, code=code)

    @classmethod
    def from_balance(cls, balance: int) -> "AccountInfo":
        """Default account information with the given balance."""
        return cls(balance=balance)

    def is_empty(self) -> bool:
        """True for zero balance, zero nonce and no code."""
        code_empty = self.code_hash == KECCAK_EMPTY or self.code_hash == B256.zero()
        return self.balance == 0 and self.nonce == 0 and code_empty

    def exists(self) -> bool:
        """True when the account is not empty."""
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountInfo):
            return NotImplemented
        return (
            self.balance == other.balance
            and self.nonce == other.nonce
            and self.code_hash == other.code_hash
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class Account:
    """An account with its cached storage and lifecycle flags."""

    info: AccountInfo = field(default_factory=AccountInfo)
    storage: dict[int, StorageSlot] = field(default_factory=dict)
    storage_cleared: bool = False
    is_destroyed: bool = False
    is_touched: bool = False
    is_not_existing: bool = False

    @classmethod
    def from_info(cls, info: AccountInfo) -> "Account":
        """Existing account with the given information and empty storage."""
        return cls(info=info)

    @classmethod
    def new_not_existing(cls) -> "Account":
        """Account marked as not existing (pre state-trie-clearing forks)."""
        return cls(is_not_existing=True)

    def is_empty(self) -> bool:
        """True when the account information is empty."""
        return self.info.is_empty()


State = dict[B160, Account]
Storage = dict[int, StorageSlot]