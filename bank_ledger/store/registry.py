"""In-memory account registry keyed by account number."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from bank_ledger.exceptions import AccountNotFoundError
from bank_ledger.logging import transaction_fields
from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountKind

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistry:
    """In-memory store of accounts, one per account number.

    Accounts are held by reference: mutating an account returned by
    ``find`` or ``all`` mutates the registered instance. Iteration
    follows registration order.
    """

    accounts: dict[int, Account] = field(default_factory=dict)

    def register(self, account: Account) -> bool:
        """Add an account; return False if its number is already taken."""
        if account.account_number in self.accounts:
            logger.info(
                "Rejected duplicate account number %s",
                account.account_number,
                extra=transaction_fields(account.account_number),
            )
            return False

        self.accounts[account.account_number] = account
        logger.info(
            "Registered %s account %s",
            account.kind.value,
            account.account_number,
            extra=transaction_fields(account.account_number, balance=account.balance),
        )
        return True

    def find(self, account_number: int) -> Account | None:
        return self.accounts.get(account_number)

    def get(self, account_number: int) -> Account:
        """Return the account or raise ``AccountNotFoundError``."""
        account = self.accounts.get(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def count(self) -> int:
        return len(self.accounts)

    def all(self) -> list[Account]:
        return list(self.accounts.values())

    def of_kind(self, kind: AccountKind) -> list[Account]:
        return [account for account in self.accounts.values() if account.kind == kind]

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self.accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self.accounts.values()))
