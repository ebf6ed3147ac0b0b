"""Read-only views returned to callers of the banking service."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from bank_ledger.exceptions import BankingError, InvalidOperationError
from bank_ledger.models.enums import AccountKind


@dataclass(frozen=True)
class AccountSnapshot:
    """Point-in-time copy of an account's state.

    ``details`` holds the variant-specific fields (rates, limits,
    counters) keyed by attribute name.
    """

    account_number: int
    holder_name: str
    kind: AccountKind
    balance: Decimal
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a service operation.

    A failed operation carries the typed error; callers distinguish a
    policy rejection from a raw shortfall with ``is_policy_violation``.
    """

    success: bool
    account_number: int
    amount: Decimal | None = None
    balance: Decimal | None = None
    error: BankingError | None = None
    recorded: bool = False

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return "OK"

    @property
    def cause_message(self) -> str | None:
        if isinstance(self.error, InvalidOperationError) and self.error.cause is not None:
            return self.error.cause.message
        return None

    @property
    def is_policy_violation(self) -> bool:
        return isinstance(self.error, InvalidOperationError) and self.error.is_policy_violation

    @classmethod
    def failed(cls, account_number: int, error: BankingError) -> "OperationResult":
        return cls(success=False, account_number=account_number, error=error)
