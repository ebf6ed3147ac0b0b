"""Sample account generator."""

import random
from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models.account import (
    Account,
    BusinessAccount,
    CheckingAccount,
    SavingsAccount,
)
from bank_ledger.models.enums import AccountKind


class AccountGenerator(BaseGenerator):
    """Generate sample bank accounts of every kind.

    Account mix:
    - CHECKING: ~50%
    - SAVINGS: ~35%
    - BUSINESS: ~15%

    Account numbers are unique per generator instance.
    """

    ACCOUNT_KINDS = [AccountKind.CHECKING, AccountKind.SAVINGS, AccountKind.BUSINESS]
    ACCOUNT_KIND_WEIGHTS = [0.50, 0.35, 0.15]

    INTEREST_PERIODS = ["Mensual", "Trimestral"]
    BUSINESS_TYPES = ["S.A.", "S.A.S.", "Ltda."]

    def __init__(self, seed: int | None = None, locale: str = "es_CO") -> None:
        super().__init__(seed, locale)
        self._issued: set[int] = set()

    def generate(self, kind: AccountKind | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Account kind; drawn from the weighted mix when omitted.

        Returns
        -------
        Account
            Generated account with a fresh account number.
        """
        if kind is None:
            kind = random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]

        account_number = self._next_account_number()

        if kind == AccountKind.SAVINGS:
            return SavingsAccount(
                holder_name=self.fake.name(),
                balance=self._money(100, 20000),
                account_number=account_number,
                interest_rate=Decimal(random.choice(["0.01", "0.015", "0.02", "0.03"])),
                interest_period=random.choice(self.INTEREST_PERIODS),
                withdrawal_limit=random.randint(2, 6),
            )
        if kind == AccountKind.CHECKING:
            return CheckingAccount(
                holder_name=self.fake.name(),
                balance=self._money(0, 10000),
                account_number=account_number,
                fixed_fee=Decimal(random.choice(["1.50", "2.00", "3.50", "5.00"])),
                overdraft_limit=Decimal(random.choice([0, 100, 250, 500, 1000])),
                checkbook_number=random.randint(100000, 999999),
            )
        return BusinessAccount(
            holder_name=self.fake.company(),
            balance=self._money(5000, 250000),
            account_number=account_number,
            business_type=random.choice(self.BUSINESS_TYPES),
            tax_id=random.randint(800000000, 999999999),
            daily_limit=Decimal(random.choice([5000, 10000, 25000, 50000])),
        )

    def generate_batch(self, count: int, kind: AccountKind | None = None) -> Iterator[Account]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate(kind)

    def _next_account_number(self) -> int:
        while True:
            number = random.randint(10000, 99999999)
            if number not in self._issued:
                self._issued.add(number)
                return number

    @staticmethod
    def _money(low: int, high: int) -> Decimal:
        return Decimal(str(round(random.uniform(low, high), 2)))
