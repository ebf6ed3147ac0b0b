"""Enumeration types for banking entities."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"
    BUSINESS = "BUSINESS"


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    INTEREST = "INTEREST"

    @property
    def legacy_label(self) -> str:
        """Label used by the delimited text ledger."""
        return _LEGACY_LABELS[self]

    @classmethod
    def from_legacy_label(cls, label: str) -> "TransactionKind":
        for kind, legacy in _LEGACY_LABELS.items():
            if legacy == label:
                return kind
        return cls(label)


_LEGACY_LABELS = {
    TransactionKind.DEPOSIT: "DEPOSITO",
    TransactionKind.WITHDRAWAL: "RETIRO",
    TransactionKind.INTEREST: "INTERESES",
}
