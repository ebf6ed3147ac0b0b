"""Human-readable delimited ledger compatible with existing log files.

Line layout::

    2024-03-01 09:15:00 | Cuenta: 1001 | DEPOSITO | Monto: $150.00 | Saldo Final: $1150.00

Amounts are written with two decimals, so values read back are rounded
to cents.
"""

import re
from datetime import datetime
from decimal import Decimal

from bank_ledger.exceptions import LedgerError
from bank_ledger.ledger.base import TransactionLedger
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.transaction import TransactionRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

RULE = "=" * 68

HEADER_LINES = (
    RULE,
    "        REGISTRO DE TRANSACCIONES - SISTEMA BANCARIO",
    RULE,
    "Formato: Fecha-Hora | Número Cuenta | Tipo | Monto | Saldo Final",
    RULE,
    "",
)

LINE_PATTERN = re.compile(
    r"^(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})"
    r" \| Cuenta: (?P<account>-?\d+)"
    r" \| (?P<kind>[A-Z]+)"
    r" \| Monto: \$(?P<amount>-?\d+(?:[.,]\d+)?)"
    r" \| Saldo Final: \$(?P<balance>-?\d+(?:[.,]\d+)?)\s*$"
)


def _parse_money(text: str) -> Decimal:
    # Logs written under a Spanish locale use a decimal comma
    return Decimal(text.replace(",", "."))


def _is_decoration(line: str) -> bool:
    return (
        line.startswith("=")
        or "REGISTRO DE" in line
        or line.startswith("Formato:")
        or not line.strip()
    )


class TextLedger(TransactionLedger):
    """Delimited text ledger with a decorative header block."""

    def header(self) -> str:
        return "\n".join(HEADER_LINES) + "\n"

    def format_record(self, record: TransactionRecord) -> str:
        return (
            f"{record.timestamp.strftime(TIMESTAMP_FORMAT)}"
            f" | Cuenta: {record.account_number}"
            f" | {record.kind.legacy_label}"
            f" | Monto: ${record.amount:.2f}"
            f" | Saldo Final: ${record.resulting_balance:.2f}"
        )

    def parse_line(self, line: str) -> TransactionRecord | None:
        if _is_decoration(line):
            return None
        match = LINE_PATTERN.match(line)
        if match is None:
            raise LedgerError(f"Unrecognized ledger line: {line!r}")
        try:
            kind = TransactionKind.from_legacy_label(match["kind"])
        except ValueError as exc:
            raise LedgerError(f"Unknown transaction kind {match['kind']!r}") from exc
        return TransactionRecord(
            timestamp=datetime.strptime(match["timestamp"], TIMESTAMP_FORMAT),
            account_number=int(match["account"]),
            kind=kind,
            amount=_parse_money(match["amount"]),
            resulting_balance=_parse_money(match["balance"]),
        )
