"""Domain models for bank-ledger."""

from bank_ledger.models.account import (
    Account,
    BusinessAccount,
    CheckingAccount,
    SavingsAccount,
    to_amount,
)
from bank_ledger.models.enums import AccountKind, TransactionKind
from bank_ledger.models.snapshot import AccountSnapshot, OperationResult
from bank_ledger.models.transaction import TransactionRecord

__all__ = [
    "Account",
    "AccountKind",
    "AccountSnapshot",
    "BusinessAccount",
    "CheckingAccount",
    "OperationResult",
    "SavingsAccount",
    "TransactionKind",
    "TransactionRecord",
    "to_amount",
]
