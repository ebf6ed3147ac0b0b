"""Transaction ledgers."""

from bank_ledger.config import LedgerConfig
from bank_ledger.ledger.base import LedgerView, TransactionLedger
from bank_ledger.ledger.jsonl import JsonLinesLedger
from bank_ledger.ledger.text import TextLedger

LEDGER_CLASSES: dict[str, type[TransactionLedger]] = {
    "jsonl": JsonLinesLedger,
    "text": TextLedger,
}


def open_ledger(config: LedgerConfig) -> TransactionLedger:
    """Build the ledger selected by ``config.format``."""
    return LEDGER_CLASSES[config.format](config.path)


__all__ = [
    "JsonLinesLedger",
    "LedgerView",
    "TextLedger",
    "TransactionLedger",
    "open_ledger",
]
