"""Tests for config and logging."""

import json
import logging
import sys
from decimal import Decimal
from pathlib import Path

import pytest

from bank_ledger.config import BankConfig, LedgerConfig
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import (
    TRANSACTION_FIELDS,
    JsonFormatter,
    get_logger,
    setup_logging,
    transaction_fields,
)
from bank_ledger.models import TransactionKind

ENV_VARS = [
    "BANK_LEDGER_PATH",
    "BANK_LEDGER_FORMAT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment with every config variable unset."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = LedgerConfig()

        assert config.format == "jsonl"
        assert config.path == Path("transactions.jsonl")

    def test_text_format_default_path(self) -> None:
        """Test the text format defaults to the legacy file name."""
        config = LedgerConfig(format="text")

        assert config.path == Path("Transacciones.txt")

    def test_custom_path(self) -> None:
        """Test an explicit path is kept as a Path."""
        config = LedgerConfig(format="text", path="/tmp/ledger.txt")

        assert config.path == Path("/tmp/ledger.txt")

    def test_unknown_format(self) -> None:
        """Test an unknown format raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown ledger format"):
            LedgerConfig(format="csv")


class TestBankConfig:
    """Tests for BankConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = BankConfig()

        assert isinstance(config.ledger, LedgerConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test configuration from an empty environment."""
        config = BankConfig.from_env()

        assert config.ledger.format == "jsonl"
        assert config.ledger.path == Path("transactions.jsonl")
        assert config.log_level == "INFO"
        assert config.seed is None

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test configuration from custom environment values."""
        clean_env.setenv("BANK_LEDGER_PATH", "/data/Transacciones.txt")
        clean_env.setenv("BANK_LEDGER_FORMAT", "TEXT")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")
        clean_env.setenv("SEED", "12345")

        config = BankConfig.from_env()

        assert config.ledger.format == "text"
        assert config.ledger.path == Path("/data/Transacciones.txt")
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 12345

    def test_from_env_invalid_seed(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test a non-integer SEED raises ConfigurationError."""
        clean_env.setenv("SEED", "abc")

        with pytest.raises(ConfigurationError, match="SEED"):
            BankConfig.from_env()

    def test_from_env_invalid_format(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test an unknown BANK_LEDGER_FORMAT raises ConfigurationError."""
        clean_env.setenv("BANK_LEDGER_FORMAT", "xml")

        with pytest.raises(ConfigurationError):
            BankConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test logging setup with default values."""
        setup_logging()

        assert logging.getLogger("bank_ledger").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test logging setup with DEBUG level."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test an invalid level falls back to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test logging setup with JSON format."""
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test existing root handlers are replaced."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        """Test the faker logger is held at WARNING."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="bank_ledger.service",
            level=kwargs.get("level", logging.INFO),
            pathname="/path/to/file.py",
            lineno=42,
            msg="Deposit on account %s",
            args=(1001,),
            exc_info=kwargs.get("exc_info"),
        )

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "bank_ledger.service"
        assert data["message"] == "Deposit on account 1001"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test log formatting with exception info."""
        try:
            raise OSError("disk full")
        except OSError:
            exc_info = sys.exc_info()

        data = json.loads(
            JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info))
        )

        assert data["level"] == "ERROR"
        assert "OSError" in data["exception"]

    def test_format_with_transaction_fields(self) -> None:
        """Test transaction fields become top-level JSON keys."""
        record = self._record()
        record.__dict__.update(
            transaction_fields(
                1001,
                kind=TransactionKind.DEPOSIT,
                amount=Decimal("5.00"),
                balance=Decimal("1005.00"),
            )
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["account_number"] == 1001
        assert data["kind"] == "DEPOSIT"
        assert data["amount"] == "5.00"
        assert data["balance"] == "1005.00"
        assert "ledger_path" not in data

    def test_format_ignores_unrelated_attributes(self) -> None:
        """Test attributes outside the transaction fields are not emitted."""
        record = self._record()
        record.holder_name = "Ana"

        data = json.loads(JsonFormatter().format(record))

        assert "holder_name" not in data

    def test_logger_extra_reaches_formatter(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test fields passed through ``extra`` are rendered."""
        logger = logging.getLogger("bank_ledger.test_extra")

        with caplog.at_level(logging.INFO, logger="bank_ledger.test_extra"):
            logger.info("Deposit", extra=transaction_fields(2001, kind=TransactionKind.WITHDRAWAL))

        data = json.loads(JsonFormatter().format(caplog.records[-1]))

        assert data["account_number"] == 2001
        assert data["kind"] == "WITHDRAWAL"


class TestTransactionFields:
    """Tests for transaction_fields helper."""

    def test_account_number_only(self) -> None:
        """Test the account number alone is a valid field set."""
        assert transaction_fields(1001) == {"account_number": 1001}

    def test_none_values_dropped(self) -> None:
        """Test fields passed as None are left out."""
        fields = transaction_fields(1001, kind=TransactionKind.INTEREST, amount=None)

        assert fields == {"account_number": 1001, "kind": TransactionKind.INTEREST}

    def test_unknown_field_rejected(self) -> None:
        """Test names outside TRANSACTION_FIELDS raise ValueError."""
        with pytest.raises(ValueError, match="holder_name"):
            transaction_fields(1001, holder_name="Ana")

    def test_no_reserved_logrecord_names(self) -> None:
        """Test field names do not clash with LogRecord attributes."""
        reserved = set(logging.makeLogRecord({}).__dict__)

        assert not reserved.intersection(TRANSACTION_FIELDS)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        """Test get_logger returns a named logger."""
        logger = get_logger("bank_ledger.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "bank_ledger.test"

    def test_get_logger_same_instance(self) -> None:
        """Test repeated calls return the same logger."""
        assert get_logger("bank_ledger.same") is get_logger("bank_ledger.same")


class TestPackageInit:
    """Tests for package metadata."""

    def test_version_exported(self) -> None:
        """Test the package exports its version."""
        from bank_ledger import __version__

        assert isinstance(__version__, str)
