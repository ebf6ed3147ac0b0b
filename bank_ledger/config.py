"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError

LEDGER_FORMATS = ("jsonl", "text")

DEFAULT_LEDGER_PATHS = {
    "jsonl": Path("transactions.jsonl"),
    "text": Path("Transacciones.txt"),
}


@dataclass
class LedgerConfig:
    """Transaction ledger configuration.

    ``path`` defaults to a file name matching ``format`` in the
    working directory.
    """

    format: str = "jsonl"
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.format not in LEDGER_FORMATS:
            raise ConfigurationError(
                f"Unknown ledger format {self.format!r}; expected one of {', '.join(LEDGER_FORMATS)}"
            )
        if self.path is None:
            self.path = DEFAULT_LEDGER_PATHS[self.format]
        else:
            self.path = Path(self.path)


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        path = os.getenv("BANK_LEDGER_PATH")
        ledger = LedgerConfig(
            format=os.getenv("BANK_LEDGER_FORMAT", "jsonl").lower(),
            path=Path(path) if path else None,
        )

        seed = os.getenv("SEED")
        try:
            seed_value = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            ledger=ledger,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed_value,
        )
