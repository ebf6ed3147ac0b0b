"""Banking service: the entry point used by presentation shells.

A ``BankingService`` is built once per process and passed to whatever
handles user commands. It resolves accounts through the registry, lets
the account apply its own rules, and records each successful operation
in the ledger. A failed operation never writes to the ledger.
"""

import logging
from decimal import Decimal
from typing import Any, Callable

from bank_ledger.config import BankConfig
from bank_ledger.exceptions import BankingError, DuplicateAccountError
from bank_ledger.ledger import LedgerView, TransactionLedger, open_ledger
from bank_ledger.logging import transaction_fields
from bank_ledger.models.account import (
    Account,
    BusinessAccount,
    SavingsAccount,
)
from bank_ledger.models.enums import AccountKind, TransactionKind
from bank_ledger.models.snapshot import AccountSnapshot, OperationResult
from bank_ledger.store.registry import AccountRegistry

logger = logging.getLogger(__name__)


class BankingService:
    """Orchestrates registry, accounts and ledger for each use case.

    Parameters
    ----------
    ledger : TransactionLedger
        Durable record of successful transactions. Initialized here.
    registry : AccountRegistry | None
        Account store; a fresh one is created when omitted.
    """

    def __init__(
        self,
        ledger: TransactionLedger,
        registry: AccountRegistry | None = None,
    ) -> None:
        self.ledger = ledger
        self.registry = registry if registry is not None else AccountRegistry()
        self.ledger.initialize()

    @classmethod
    def from_config(cls, config: BankConfig) -> "BankingService":
        return cls(ledger=open_ledger(config.ledger))

    def open_account(self, account: Account) -> OperationResult:
        """Register a new account. Fails with ``DuplicateAccountError``."""
        if not self.registry.register(account):
            return OperationResult.failed(
                account.account_number, DuplicateAccountError(account.account_number)
            )
        return OperationResult(
            success=True,
            account_number=account.account_number,
            balance=account.balance,
        )

    def deposit(self, account_number: int, amount: Any) -> OperationResult:
        return self._apply(
            account_number,
            TransactionKind.DEPOSIT,
            lambda account: account.deposit(amount),
        )

    def withdraw(self, account_number: int, amount: Any) -> OperationResult:
        return self._apply(
            account_number,
            TransactionKind.WITHDRAWAL,
            lambda account: account.withdraw(amount),
        )

    def accrue_interest(self, account_number: int) -> OperationResult:
        """Accrue one period of interest.

        Accounts that do not earn interest succeed with amount 0 and
        leave no ledger record. Negative interest (on a negative opening
        balance) is recorded like any other balance change.
        """
        return self._apply(
            account_number,
            TransactionKind.INTEREST,
            lambda account: account.accrue_interest(),
        )

    def describe_account(self, account_number: int) -> AccountSnapshot | None:
        account = self.registry.find(account_number)
        return account.snapshot() if account is not None else None

    def list_accounts(self) -> list[AccountSnapshot]:
        return [account.snapshot() for account in self.registry.all()]

    def account_count(self) -> int:
        return self.registry.count()

    def history(self, account_number: int) -> LedgerView:
        return self.ledger.query_by_account(account_number)

    def all_history(self) -> LedgerView:
        return self.ledger.query_all()

    def clear_history(self) -> bool:
        return self.ledger.clear()

    def start_new_period(self) -> int:
        """Reset the withdrawal counter of every savings account."""
        accounts = self.registry.of_kind(AccountKind.SAVINGS)
        for account in accounts:
            account.reset_withdrawals()
        logger.info("Started new withdrawal period for %d savings accounts", len(accounts))
        return len(accounts)

    def start_new_day(self) -> int:
        """Reset the daily withdrawal total of every business account."""
        accounts = self.registry.of_kind(AccountKind.BUSINESS)
        for account in accounts:
            account.reset_daily_limit()
        logger.info("Started new business day for %d business accounts", len(accounts))
        return len(accounts)

    def reset_counters(self, account_number: int) -> int:
        """Reset the periodic counter of a single account.

        Returns 1 if the account has a counter, 0 otherwise.

        Raises
        ------
        AccountNotFoundError
            If the account is not registered.
        """
        account = self.registry.get(account_number)
        if isinstance(account, SavingsAccount):
            account.reset_withdrawals()
        elif isinstance(account, BusinessAccount):
            account.reset_daily_limit()
        else:
            return 0
        return 1

    def _apply(
        self,
        account_number: int,
        kind: TransactionKind,
        operation: Callable[[Account], Decimal],
    ) -> OperationResult:
        try:
            account = self.registry.get(account_number)
            amount = operation(account)
        except BankingError as exc:
            logger.info(
                "%s on account %s rejected: %s",
                kind.value,
                account_number,
                exc.message,
                extra=transaction_fields(account_number, kind=kind),
            )
            return OperationResult.failed(account_number, exc)

        # Zero means the account does not accrue; anything else moved the balance
        recorded = False
        if amount != 0:
            recorded = self.ledger.append(account_number, kind, amount, account.balance)
            if not recorded:
                logger.error(
                    "%s on account %s applied but not recorded; ledger and balances have diverged",
                    kind.value,
                    account_number,
                    extra=transaction_fields(
                        account_number, kind=kind, amount=amount, balance=account.balance
                    ),
                )

        return OperationResult(
            success=True,
            account_number=account_number,
            amount=amount,
            balance=account.balance,
            recorded=recorded,
        )
