"""
Data Models Package

Pydantic models for ledger journal contents, the locale formatting
options used to read and write them, and audit events.
"""

from ledgerjournal.models.options import (
    LOCALE_PRESETS,
    LedgerOptions,
    get_default_options,
)
from ledgerjournal.models.posting import Posting
from ledgerjournal.models.transaction import (
    Transaction,
    TransactionState,
)
from ledgerjournal.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LOCALE_PRESETS",
    "LedgerOptions",
    "Posting",
    "Transaction",
    "TransactionState",
    "get_default_options",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
