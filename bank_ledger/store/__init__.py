"""Account storage."""

from bank_ledger.store.registry import AccountRegistry

__all__ = ["AccountRegistry"]
