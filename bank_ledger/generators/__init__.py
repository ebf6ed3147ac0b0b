"""Sample data generators."""

from bank_ledger.generators.account import AccountGenerator
from bank_ledger.generators.base import BaseGenerator

__all__ = ["AccountGenerator", "BaseGenerator"]
