"""JSON Lines ledger: one JSON object per transaction."""

import json

from bank_ledger.exceptions import LedgerError
from bank_ledger.ledger.base import TransactionLedger
from bank_ledger.ledger.serialization import record_from_dict, record_to_dict
from bank_ledger.models.transaction import TransactionRecord

HEADER = {"ledger": "bank-ledger", "format": "jsonl", "version": 1}


class JsonLinesLedger(TransactionLedger):
    """Structured ledger format.

    The first line is a fixed header object; every following line is a
    serialized ``TransactionRecord``.
    """

    def header(self) -> str:
        return json.dumps(HEADER) + "\n"

    def format_record(self, record: TransactionRecord) -> str:
        return json.dumps(record_to_dict(record), ensure_ascii=False)

    def parse_line(self, line: str) -> TransactionRecord | None:
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            raise LedgerError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise LedgerError(f"Expected an object, got {type(data).__name__}")
        if "ledger" in data and "account_number" not in data:
            return None
        return record_from_dict(data)
