"""Bank account rules with an append-only transaction ledger."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankingError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidOperationError,
)
from bank_ledger.models import (
    BusinessAccount,
    CheckingAccount,
    SavingsAccount,
    TransactionKind,
    TransactionRecord,
)
from bank_ledger.service import BankingService

__version__ = "0.1.0"

__all__ = [
    "AccountNotFoundError",
    "BankingError",
    "BankingService",
    "BusinessAccount",
    "CheckingAccount",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidOperationError",
    "SavingsAccount",
    "TransactionKind",
    "TransactionRecord",
    "__version__",
]
