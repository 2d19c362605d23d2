"""Outcomes of transaction execution and the errors that stop it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .bits import B160
from .log import Log
from .state import Account


class Eval(Enum):
    """How a successful execution ended."""

    STOP = "stop"
    RETURN = "return"
    SELF_DESTRUCT = "self_destruct"


class Halt(Enum):
    """Exceptional halts that consume all gas."""

    OUT_OF_GAS = "out_of_gas"
    OPCODE_NOT_FOUND = "opcode_not_found"
    INVALID_FE_OPCODE = "invalid_fe_opcode"
    INVALID_JUMP = "invalid_jump"
    NOT_ACTIVATED = "not_activated"
    STACK_UNDERFLOW = "stack_underflow"
    STACK_OVERFLOW = "stack_overflow"
    OUT_OF_OFFSET = "out_of_offset"
    CREATE_COLLISION = "create_collision"
    OVERFLOW_PAYMENT = "overflow_payment"
    PRECOMPILE_ERROR = "precompile_error"
    NONCE_OVERFLOW = "nonce_overflow"
    CREATE_CONTRACT_SIZE_LIMIT = "create_contract_size_limit"
    CREATE_CONTRACT_STARTING_WITH_EF = "create_contract_starting_with_ef"


class InvalidTransaction(Enum):
    """Reasons a transaction is rejected before execution."""

    GAS_MAX_FEE_GREATER_THAN_PRIORITY_FEE = "gas_max_fee_greater_than_priority_fee"
    GAS_PRICE_LESS_THAN_BASEFEE = "gas_price_less_than_basefee"
    CALLER_GAS_LIMIT_MORE_THAN_BLOCK = "caller_gas_limit_more_than_block"
    CALL_GAS_COST_MORE_THAN_GAS_LIMIT = "call_gas_cost_more_than_gas_limit"
    REJECT_CALLER_WITH_CODE = "reject_caller_with_code"
    LACK_OF_FUND_FOR_GAS_LIMIT = "lack_of_fund_for_gas_limit"
    OVERFLOW_PAYMENT_IN_TRANSACTION = "overflow_payment_in_transaction"
    NONCE_OVERFLOW_IN_TRANSACTION = "nonce_overflow_in_transaction"


@dataclass(frozen=True)
class CallOutput:
    """Data returned by a call."""

    data: bytes = b""


@dataclass(frozen=True)
class CreateOutput:
    """Data returned by a creation and the created address, if any."""

    data: bytes = b""
    address: B160 | None = None


Output = Union[CallOutput, CreateOutput]


class ExecutionResult:
    """Common interface of the execution outcomes."""

    gas_used: int

    def is_success(self) -> bool:
        """True only for a successful execution."""
        return False

    def logs(self) -> list[Log]:
        """Emitted logs; empty unless the execution succeeded."""
        return []


@dataclass(frozen=True)
class Success(ExecutionResult):
    """Execution returned successfully."""

    reason: Eval
    gas_used: int
    gas_refunded: int
    event_logs: tuple[Log, ...]
    output: Output

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_logs", tuple(self.event_logs))

    def is_success(self) -> bool:
        return True

    def logs(self) -> list[Log]:
        return list(self.event_logs)


@dataclass(frozen=True)
class Revert(ExecutionResult):
    """Execution reverted by ``REVERT`` without spending all gas."""

    gas_used: int
    output: bytes = b""


@dataclass(frozen=True)
class Halted(ExecutionResult):
    """Execution halted and spent all gas."""

    reason: Halt
    gas_used: int


@dataclass
class ResultAndState:
    """Execution outcome together with the touched state."""

    result: ExecutionResult
    state: dict[B160, Account] = field(default_factory=dict)


class EVMError(Exception):
    """Execution could not be carried out."""

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class TransactionError(EVMError):
    """The transaction is invalid."""

    def __init__(self, reason: InvalidTransaction) -> None:
        super().__init__(f"invalid transaction: {reason.value}")
        self.reason = reason

    def _fields(self) -> tuple:
        return (self.reason,)


class PrevrandaoNotSet(EVMError):
    """The environment lacks a prevrandao value where one is required."""

    def __init__(self) -> None:
        super().__init__("prevrandao is not set")


class DatabaseError(EVMError):
    """The database reported an error."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"database error: {error}")
        self.error = error

    def _fields(self) -> tuple:
        return (self.error,)