"""Audit logging package."""

from ledgerjournal.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
