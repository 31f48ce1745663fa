"""Services package."""

from ledgerjournal.services.engine import (
    LedgerCliEngine,
    LedgerEngineInterface,
)

__all__ = [
    "LedgerCliEngine",
    "LedgerEngineInterface",
]
