"""
Audit Models for ledgerjournal

Loading, saving and every call into the ledger engine produce an audit
event. Events are written as structured log lines by AuditLogger.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Engine calls
    ENGINE_INVOKED = "engine_invoked"
    ENGINE_FAILED = "engine_failed"

    # Journal lifecycle
    JOURNAL_LOADED = "journal_loaded"
    JOURNAL_SAVED = "journal_saved"
    PRETTY_PRINT_FAILED = "pretty_print_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # What the event is about, e.g. the journal path or the engine binary
    entity: Optional[str] = None

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity": self.entity,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.journal_loaded("books.ledger", 12)
    """

    @staticmethod
    def engine_invoked(command: list[str]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENGINE_INVOKED,
            severity=AuditSeverity.DEBUG,
            entity=command[0] if command else None,
            description=f"Running {' '.join(command)}"[:500],
            details={"command": command},
        )

    @staticmethod
    def engine_failed(
        command: list[str],
        error_message: str,
        returncode: Optional[int] = None,
    ) -> AuditEvent:
        """The failure also reaches the caller as EngineInvocationError."""
        if returncode is None:
            description = "ledger engine could not be launched"
        else:
            description = f"ledger engine exited with status {returncode}"
        return AuditEvent(
            event_type=AuditEventType.ENGINE_FAILED,
            severity=AuditSeverity.WARNING,
            entity=command[0] if command else None,
            description=description,
            details={"command": command, "returncode": returncode},
            error_message=error_message,
        )

    @staticmethod
    def journal_loaded(path: str, transaction_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOURNAL_LOADED,
            entity=path,
            description=f"Loaded {transaction_count} transactions from {path}"[:500],
            details={"transaction_count": transaction_count},
        )

    @staticmethod
    def journal_saved(path: str, transaction_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOURNAL_SAVED,
            entity=path,
            description=f"Saved {transaction_count} transactions to {path}"[:500],
            details={"transaction_count": transaction_count},
        )

    @staticmethod
    def pretty_print_failed(
        path: Optional[str],
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PRETTY_PRINT_FAILED,
            severity=AuditSeverity.WARNING,
            entity=path,
            description="Couldn't format transaction log, returning unformatted text",
            error_message=error_message,
        )
