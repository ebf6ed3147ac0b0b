"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from bank_ledger.ledger import JsonLinesLedger, TextLedger
from bank_ledger.models import BusinessAccount, CheckingAccount, SavingsAccount
from bank_ledger.service import BankingService


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock() -> datetime:
    """Fixed timestamp for ledger records."""
    return datetime(2024, 3, 1, 9, 15, 0)


@pytest.fixture
def savings() -> SavingsAccount:
    """Savings account: balance 1000, 2% per period, 2 withdrawals."""
    return SavingsAccount(
        holder_name="Ana Gómez",
        balance=Decimal("1000"),
        account_number=1001,
        interest_rate=Decimal("0.02"),
        interest_period="Mensual",
        withdrawal_limit=2,
    )


@pytest.fixture
def checking() -> CheckingAccount:
    """Checking account: balance 100, fee 5, overdraft 50."""
    return CheckingAccount(
        holder_name="Luis Pérez",
        balance=Decimal("100"),
        account_number=2001,
        fixed_fee=Decimal("5"),
        overdraft_limit=Decimal("50"),
        checkbook_number=555001,
    )


@pytest.fixture
def business() -> BusinessAccount:
    """Business account: balance 5000, daily limit 1000."""
    return BusinessAccount(
        holder_name="Acme Andina",
        balance=Decimal("5000"),
        account_number=3001,
        business_type="S.A.S.",
        tax_id=900123456,
        daily_limit=Decimal("1000"),
    )


@pytest.fixture
def jsonl_ledger(tmp_path: Path, fixed_clock: datetime) -> JsonLinesLedger:
    """JSON Lines ledger in a temporary directory with a fixed clock."""
    ledger = JsonLinesLedger(tmp_path / "transactions.jsonl", clock=lambda: fixed_clock)
    ledger.initialize()
    return ledger


@pytest.fixture
def text_ledger(tmp_path: Path, fixed_clock: datetime) -> TextLedger:
    """Legacy text ledger in a temporary directory with a fixed clock."""
    ledger = TextLedger(tmp_path / "Transacciones.txt", clock=lambda: fixed_clock)
    ledger.initialize()
    return ledger


@pytest.fixture
def service(
    jsonl_ledger: JsonLinesLedger,
    savings: SavingsAccount,
    checking: CheckingAccount,
    business: BusinessAccount,
) -> BankingService:
    """Service with one account of each kind registered."""
    svc = BankingService(ledger=jsonl_ledger)
    for account in (savings, checking, business):
        svc.open_account(account)
    return svc
