"""Serialization helpers for ledger records."""

from dataclasses import fields
from datetime import datetime
from decimal import Decimal, DecimalException
from enum import Enum
from typing import Any

from bank_ledger.exceptions import LedgerError
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.transaction import TransactionRecord


def serialize_value(value: Any) -> Any:
    """Serialize a record field for JSON output.

    Decimals become strings so amounts keep their exact digits.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    return value


def record_to_dict(record: TransactionRecord) -> dict:
    """Convert a record to a JSON-ready dict without deep copying."""
    return {f.name: serialize_value(getattr(record, f.name)) for f in fields(record)}


def record_from_dict(data: dict) -> TransactionRecord:
    """Rebuild a record from ``record_to_dict`` output.

    Raises
    ------
    LedgerError
        If a field is missing or malformed.
    """
    try:
        return TransactionRecord(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            account_number=int(data["account_number"]),
            kind=TransactionKind(data["kind"]),
            amount=Decimal(str(data["amount"])),
            resulting_balance=Decimal(str(data["resulting_balance"])),
        )
    except (KeyError, TypeError, ValueError, DecimalException) as exc:
        raise LedgerError(f"Malformed ledger record: {data!r}") from exc
