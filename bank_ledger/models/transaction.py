"""Transaction record model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class TransactionRecord:
    """One successful account operation as written to the ledger.

    ``account_number`` references the account by value only; records
    never hold the account object.
    """

    timestamp: datetime
    account_number: int
    kind: TransactionKind
    amount: Decimal
    resulting_balance: Decimal
