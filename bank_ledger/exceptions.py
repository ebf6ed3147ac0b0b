"""Custom exception hierarchy for bank-ledger."""


class BankingError(Exception):
    """Base exception for all bank-ledger errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InsufficientFundsError(BankingError):
    """Raised when the balance (or a capacity) cannot cover an operation."""


class InvalidOperationError(BankingError):
    """Raised for malformed amounts and policy-limit violations.

    When a policy limit (withdrawal count, overdraft ceiling, daily cap)
    rejects the operation, ``cause`` holds an ``InsufficientFundsError``
    describing the capacity shortfall. Plain input errors carry no cause.
    """

    def __init__(self, message: str, cause: InsufficientFundsError | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def is_policy_violation(self) -> bool:
        return self.cause is not None


class AccountNotFoundError(BankingError):
    """Raised when an account number is not registered."""

    def __init__(self, account_number: int) -> None:
        super().__init__(f"Account {account_number} not found")
        self.account_number = account_number


class DuplicateAccountError(BankingError):
    """Raised when an account number is already registered."""

    def __init__(self, account_number: int) -> None:
        super().__init__(f"Account {account_number} already exists")
        self.account_number = account_number


class ConfigurationError(BankingError):
    """Raised when configuration is invalid or missing."""


class LedgerError(BankingError):
    """Raised when a ledger line cannot be parsed."""
