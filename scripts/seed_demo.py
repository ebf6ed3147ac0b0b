#!/usr/bin/env python3
"""Seed sample accounts and run a simulated banking day.

Generates accounts of every kind, registers them with a BankingService,
applies random deposits and withdrawals, accrues interest, and prints
the resulting ledger. Rejected operations are reported with their cause.
"""

import argparse
import os
import random
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import BankConfig, LedgerConfig
from bank_ledger.generators import AccountGenerator
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.service import BankingService

logger = get_logger(__name__)


def resolve_ledger_config(
    current: LedgerConfig,
    ledger_format: str | None,
    ledger_path: Path | None,
) -> LedgerConfig:
    """Apply command-line ledger options over the environment config.

    Only the options given are replaced. A path set through
    BANK_LEDGER_PATH is kept when only ``--format`` is passed; without
    it, a format change also switches to that format's default file.
    """
    if ledger_format is None and ledger_path is None:
        return current
    new_format = ledger_format or current.format
    if ledger_path is None and (os.getenv("BANK_LEDGER_PATH") or new_format == current.format):
        ledger_path = current.path
    return LedgerConfig(format=new_format, path=ledger_path)


def seed_accounts(service: BankingService, generator: AccountGenerator, count: int) -> list[int]:
    """Generate and register ``count`` accounts."""
    numbers = []
    for account in generator.generate_batch(count):
        result = service.open_account(account)
        if result.success:
            numbers.append(account.account_number)
    logger.info("Registered %d accounts", len(numbers))
    return numbers


def simulate_day(service: BankingService, numbers: list[int], operations: int) -> None:
    """Apply random deposits and withdrawals, then accrue interest."""
    rejected = 0
    for _ in range(operations):
        number = random.choice(numbers)
        amount = Decimal(str(round(random.uniform(10, 3000), 2)))
        if random.random() < 0.4:
            result = service.deposit(number, amount)
        else:
            result = service.withdraw(number, amount)
        if not result.success:
            rejected += 1
            detail = f" ({result.cause_message})" if result.cause_message else ""
            print(f"  rejected #{number}: {result.message}{detail}")
    logger.info("Applied %d operations, %d rejected", operations, rejected)

    for number in numbers:
        service.accrue_interest(number)

    service.start_new_day()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed sample accounts and run a demo day")
    parser.add_argument(
        "--accounts",
        type=int,
        default=10,
        help="Number of accounts to generate (default: 10)",
    )
    parser.add_argument(
        "--operations",
        type=int,
        default=30,
        help="Number of random deposits/withdrawals (default: 30)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED env var)",
    )
    parser.add_argument(
        "--ledger",
        type=Path,
        default=None,
        help="Ledger file path (default: BANK_LEDGER_PATH env var)",
    )
    parser.add_argument(
        "--format",
        choices=["jsonl", "text"],
        default=None,
        help="Ledger format (default: BANK_LEDGER_FORMAT env var or jsonl)",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the ledger before seeding",
    )
    args = parser.parse_args()

    config = BankConfig.from_env()
    config.ledger = resolve_ledger_config(config.ledger, args.format, args.ledger)
    seed = args.seed if args.seed is not None else config.seed

    setup_logging(config.log_level, config.log_format)

    service = BankingService.from_config(config)
    if args.clear:
        service.clear_history()

    generator = AccountGenerator(seed=seed)
    numbers = seed_accounts(service, generator, args.accounts)
    if not numbers:
        logger.warning("No accounts registered; nothing to simulate")
        return

    simulate_day(service, numbers, args.operations)

    print()
    for snapshot in service.list_accounts():
        print(
            f"#{snapshot.account_number} {snapshot.kind.value:<8} "
            f"{snapshot.holder_name:<30} ${snapshot.balance:,.2f}"
        )
    print()
    for line in service.ledger.raw_lines():
        print(line)


if __name__ == "__main__":
    main()
