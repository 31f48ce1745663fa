"""
ledgerjournal

Read and write ledger-cli journal files as Python objects.

Journals are loaded through ledger's XML report into Transaction and
Posting models and written back as ledger text, formatted according to
a LedgerOptions locale (en or de).
"""

__version__ = "1.0.0"

from ledgerjournal.audit import configure_logging
from ledgerjournal.errors import (
    CurrencyMismatchError,
    EngineInvocationError,
    JournalNotFoundError,
    LedgerError,
    MalformedAmountError,
    MalformedDateError,
    MalformedXmlError,
    NoAssociatedPathError,
    UnknownStateError,
    UnsupportedLocaleError,
)
from ledgerjournal.models import (
    LedgerOptions,
    Posting,
    Transaction,
    TransactionState,
    get_default_options,
)
from ledgerjournal.services.engine import LedgerCliEngine, LedgerEngineInterface
from ledgerjournal.journal import Journal

__all__ = [
    "Journal",
    "LedgerCliEngine",
    "LedgerEngineInterface",
    "LedgerOptions",
    "Posting",
    "Transaction",
    "TransactionState",
    "configure_logging",
    "get_default_options",
    # Errors
    "CurrencyMismatchError",
    "EngineInvocationError",
    "JournalNotFoundError",
    "LedgerError",
    "MalformedAmountError",
    "MalformedDateError",
    "MalformedXmlError",
    "NoAssociatedPathError",
    "UnknownStateError",
    "UnsupportedLocaleError",
]
