"""Account models and their per-kind transaction rules.

Each account kind implements deposit, withdraw and accrue_interest on
its own. Validation order inside ``withdraw`` is part of the contract:
a policy limit is checked before the balance, and a policy rejection is
raised as ``InvalidOperationError`` chained to an
``InsufficientFundsError`` describing the capacity shortfall. A plain
balance shortfall is raised as ``InsufficientFundsError`` with no chain.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, DecimalException
from typing import Any

from bank_ledger.exceptions import InsufficientFundsError, InvalidOperationError
from bank_ledger.models.enums import AccountKind
from bank_ledger.models.snapshot import AccountSnapshot

ZERO = Decimal("0")

BUSINESS_INTEREST_RATE = Decimal("0.005")


def to_amount(value: Any) -> Decimal:
    """Coerce a numeric value to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise InvalidOperationError(f"Amount must be numeric, got {value!r}")
    elif isinstance(value, int):
        amount = Decimal(value)
    else:
        try:
            amount = Decimal(str(value))
        except DecimalException as exc:
            raise InvalidOperationError(f"Amount must be numeric, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidOperationError(f"Amount must be a finite number, got {value!r}")
    return amount


def _require_positive(amount: Any, action: str) -> Decimal:
    value = to_amount(amount)
    if value <= 0:
        raise InvalidOperationError(
            f"The amount to {action} must be greater than zero. Amount received: {value}"
        )
    return value


class Account(ABC):
    """Bank account base class.

    ``account_number`` is fixed at construction. ``balance`` can only be
    changed through the account's own operations.
    """

    kind: AccountKind

    def __init__(self, holder_name: str, balance: Any, account_number: int) -> None:
        self.holder_name = holder_name
        self._balance = to_amount(balance)
        self._account_number = int(account_number)

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @abstractmethod
    def deposit(self, amount: Any) -> Decimal:
        """Credit ``amount`` and return it."""

    @abstractmethod
    def withdraw(self, amount: Any) -> Decimal:
        """Debit ``amount`` under the account's rules and return it."""

    @abstractmethod
    def accrue_interest(self) -> Decimal:
        """Credit interest for one period and return it (0 if none)."""

    def _details(self) -> dict[str, Any]:
        return {}

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            account_number=self.account_number,
            holder_name=self.holder_name,
            kind=self.kind,
            balance=self.balance,
            details=self._details(),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} #{self.account_number} {self.holder_name!r} balance={self.balance}>"


class SavingsAccount(Account):
    """Savings account with interest and a cap on withdrawals per period.

    ``interest_period`` is informational ("Monthly", "Quarterly", ...).
    The withdrawal counter is reset by ``reset_withdrawals`` only.
    """

    kind = AccountKind.SAVINGS

    def __init__(
        self,
        holder_name: str,
        balance: Any,
        account_number: int,
        interest_rate: Any,
        interest_period: str,
        withdrawal_limit: int,
        withdrawals_used: int = 0,
    ) -> None:
        super().__init__(holder_name, balance, account_number)
        self.interest_rate = to_amount(interest_rate)
        self.interest_period = interest_period
        self.withdrawal_limit = int(withdrawal_limit)
        self._withdrawals_used = int(withdrawals_used)

    @property
    def withdrawals_used(self) -> int:
        return self._withdrawals_used

    @property
    def remaining_withdrawals(self) -> int:
        return max(0, self.withdrawal_limit - self._withdrawals_used)

    def deposit(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "deposit")
        self._balance += value
        return value

    def withdraw(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "withdraw")

        if self._withdrawals_used >= self.withdrawal_limit:
            cause = InsufficientFundsError("No withdrawals remaining this period")
            raise InvalidOperationError(
                f"Withdrawal limit exceeded. Allowed: {self.withdrawal_limit}, "
                f"Used: {self._withdrawals_used}",
                cause=cause,
            ) from cause

        if self._balance < value:
            raise InsufficientFundsError(
                f"Insufficient funds. Available: ${self._balance}, Requested: ${value}"
            )

        self._balance -= value
        self._withdrawals_used += 1
        return value

    def accrue_interest(self) -> Decimal:
        interest = self._balance * self.interest_rate
        self._balance += interest
        return interest

    def reset_withdrawals(self) -> None:
        """Start a new withdrawal period."""
        self._withdrawals_used = 0

    def _details(self) -> dict[str, Any]:
        return {
            "interest_rate": self.interest_rate,
            "interest_period": self.interest_period,
            "withdrawal_limit": self.withdrawal_limit,
            "withdrawals_used": self._withdrawals_used,
        }


class CheckingAccount(Account):
    """Checking account with a per-withdrawal fee and an overdraft line.

    The fee is debited together with the withdrawal but is not part of
    the returned amount. Checking accounts never earn interest.
    """

    kind = AccountKind.CHECKING

    def __init__(
        self,
        holder_name: str,
        balance: Any,
        account_number: int,
        fixed_fee: Any,
        overdraft_limit: Any,
        checkbook_number: int,
    ) -> None:
        super().__init__(holder_name, balance, account_number)
        self.fixed_fee = to_amount(fixed_fee)
        self.overdraft_limit = to_amount(overdraft_limit)
        if self.overdraft_limit < 0:
            raise InvalidOperationError(
                f"Overdraft limit cannot be negative, got {self.overdraft_limit}"
            )
        self.checkbook_number = int(checkbook_number)

    @property
    def is_overdrawn(self) -> bool:
        return self._balance < 0

    def deposit(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "deposit")
        self._balance += value
        return value

    def withdraw(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "withdraw")

        total_debit = value + self.fixed_fee
        projected = self._balance - total_debit
        if projected < -self.overdraft_limit:
            cause = InsufficientFundsError(
                f"Current balance: ${self._balance}, Amount + fee: ${total_debit}, "
                f"Resulting balance would be: ${projected}"
            )
            raise InvalidOperationError(
                f"Operation rejected. Exceeds the overdraft limit of ${self.overdraft_limit}",
                cause=cause,
            ) from cause

        self._balance = projected
        return value

    def accrue_interest(self) -> Decimal:
        return ZERO

    def _details(self) -> dict[str, Any]:
        return {
            "fixed_fee": self.fixed_fee,
            "overdraft_limit": self.overdraft_limit,
            "checkbook_number": self.checkbook_number,
            "is_overdrawn": self.is_overdrawn,
        }


class BusinessAccount(Account):
    """Business account with a cumulative daily withdrawal cap.

    Interest accrues at the fixed preferential rate of 0.5%. The daily
    total is reset by ``reset_daily_limit`` only.
    """

    kind = AccountKind.BUSINESS

    def __init__(
        self,
        holder_name: str,
        balance: Any,
        account_number: int,
        business_type: str,
        tax_id: int,
        daily_limit: Any,
        withdrawn_today: Any = ZERO,
    ) -> None:
        super().__init__(holder_name, balance, account_number)
        self.business_type = business_type
        self.tax_id = int(tax_id)
        self.daily_limit = to_amount(daily_limit)
        self._withdrawn_today = to_amount(withdrawn_today)

    @property
    def withdrawn_today(self) -> Decimal:
        return self._withdrawn_today

    @property
    def available_today(self) -> Decimal:
        return self.daily_limit - self._withdrawn_today

    def deposit(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "deposit")
        self._balance += value
        return value

    def withdraw(self, amount: Any) -> Decimal:
        value = _require_positive(amount, "withdraw")

        if self._withdrawn_today + value > self.daily_limit:
            cause = InsufficientFundsError(f"Available today: ${self.available_today}")
            raise InvalidOperationError(
                f"Daily limit exceeded. Limit: ${self.daily_limit}, "
                f"Already withdrawn today: ${self._withdrawn_today}, Attempted: ${value}",
                cause=cause,
            ) from cause

        if self._balance < value:
            raise InsufficientFundsError(
                f"Insufficient funds. Available: ${self._balance}, Requested: ${value}"
            )

        self._balance -= value
        self._withdrawn_today += value
        return value

    def accrue_interest(self) -> Decimal:
        interest = self._balance * BUSINESS_INTEREST_RATE
        self._balance += interest
        return interest

    def reset_daily_limit(self) -> None:
        """Start a new business day."""
        self._withdrawn_today = ZERO

    def _details(self) -> dict[str, Any]:
        return {
            "business_type": self.business_type,
            "tax_id": self.tax_id,
            "daily_limit": self.daily_limit,
            "withdrawn_today": self._withdrawn_today,
            "available_today": self.available_today,
        }
