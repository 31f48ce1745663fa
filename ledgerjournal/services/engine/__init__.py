"""Ledger engine services package."""

from ledgerjournal.services.engine.interface import LedgerEngineInterface
from ledgerjournal.services.engine.ledger_cli import LedgerCliEngine

__all__ = [
    "LedgerCliEngine",
    "LedgerEngineInterface",
]
