"""Append-only transaction ledger backed by a flat file.

The file is opened, written and closed for every append. Reads scan the
whole file in order; there is no index.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable, Iterator

from bank_ledger.exceptions import LedgerError
from bank_ledger.logging import transaction_fields
from bank_ledger.models.account import to_amount
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)


class LedgerView:
    """Lazy, restartable sequence of ledger records.

    Each iteration re-reads the ledger file from the start.
    """

    def __init__(self, source: Callable[[], Iterator[TransactionRecord]]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[TransactionRecord]:
        return self._source()

    def to_list(self) -> list[TransactionRecord]:
        return list(self)


class TransactionLedger(ABC):
    """Durable, append-only log of successful transactions.

    Parameters
    ----------
    path : str | Path
        Ledger file location.
    clock : Callable[[], datetime]
        Source of record timestamps (default ``datetime.now``).
    """

    def __init__(
        self,
        path: str | Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.path = Path(path)
        self.clock = clock

    @abstractmethod
    def header(self) -> str:
        """Fixed text written at the top of a new ledger file."""

    @abstractmethod
    def format_record(self, record: TransactionRecord) -> str:
        """Render one record as a single line (without newline)."""

    @abstractmethod
    def parse_line(self, line: str) -> TransactionRecord | None:
        """Parse one line; return None for header and decorative lines.

        Raises
        ------
        LedgerError
            If the line looks like a record but cannot be parsed.
        """

    def initialize(self) -> bool:
        """Create the ledger file with its header if it does not exist."""
        if self.path.exists():
            return True
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.write(self.header())
        except OSError as exc:
            logger.error("Could not create ledger %s: %s", self.path, exc)
            return False
        logger.info("Created transaction ledger at %s", self.path)
        return True

    def append(
        self,
        account_number: int,
        kind: TransactionKind,
        amount: Decimal,
        resulting_balance: Decimal,
    ) -> bool:
        """Append one record stamped with the current time.

        I/O failures are logged and reported as False; they never raise.
        """
        record = TransactionRecord(
            timestamp=self.clock(),
            account_number=account_number,
            kind=TransactionKind(kind),
            amount=to_amount(amount),
            resulting_balance=to_amount(resulting_balance),
        )
        try:
            with open(self.path, "a", encoding="utf-8", newline="\n") as f:
                f.write(self.format_record(record) + "\n")
        except OSError as exc:
            logger.error(
                "Could not record %s for account %s in %s: %s",
                record.kind.value,
                account_number,
                self.path,
                exc,
                extra=transaction_fields(
                    account_number,
                    kind=record.kind,
                    amount=record.amount,
                    balance=record.resulting_balance,
                    ledger_path=str(self.path),
                ),
            )
            return False
        return True

    def query_by_account(self, account_number: int) -> LedgerView:
        """Records for one account, oldest first. Empty if none."""
        return LedgerView(
            lambda: (r for r in self._scan() if r.account_number == account_number)
        )

    def query_all(self) -> LedgerView:
        """Every record, oldest first."""
        return LedgerView(self._scan)

    def raw_lines(self) -> Iterator[str]:
        """Yield the ledger file verbatim, header included."""
        if not self.path.exists():
            return
        with open(self.path, encoding="utf-8") as f:
            for line in f:
                yield line.rstrip("\n")

    def clear(self) -> bool:
        """Erase every record and recreate the empty ledger."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Could not clear ledger %s: %s", self.path, exc)
            return False
        logger.warning("Cleared transaction ledger at %s", self.path)
        return self.initialize()

    def _scan(self) -> Iterator[TransactionRecord]:
        if not self.path.exists():
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.rstrip("\n")
                    if not line.strip():
                        continue
                    try:
                        record = self.parse_line(line)
                    except LedgerError as exc:
                        logger.debug("Skipping %s:%d: %s", self.path, lineno, exc)
                        continue
                    if record is not None:
                        yield record
        except OSError as exc:
            logger.error("Could not read ledger %s: %s", self.path, exc)
