"""Logging configuration for bank-ledger.

Service and ledger log calls attach the transaction they concern through
``extra=transaction_fields(...)``. ``JsonFormatter`` renders those fields
as top-level keys so rejected and unrecorded operations can be searched
by account number.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

# LogRecord attributes set through ``extra``
TRANSACTION_FIELDS = ("account_number", "kind", "amount", "balance", "ledger_path")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for bank-ledger.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("bank_ledger").setLevel(log_level)

    # Sample-data generation runs Faker, which logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def transaction_fields(account_number: int, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for a log call about one transaction.

    Only names in ``TRANSACTION_FIELDS`` are accepted; ``None`` values
    are dropped.
    """
    unknown = set(fields) - set(TRANSACTION_FIELDS)
    if unknown:
        raise ValueError(f"Unknown transaction log fields: {sorted(unknown)}")
    extra = {"account_number": account_number}
    extra.update({name: value for name, value in fields.items() if value is not None})
    return extra


def _json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


class JsonFormatter(logging.Formatter):
    """JSON log formatter that lifts transaction fields to top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in TRANSACTION_FIELDS:
            if hasattr(record, name):
                log_data[name] = _json_value(getattr(record, name))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
