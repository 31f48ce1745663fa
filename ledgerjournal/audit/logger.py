"""
Audit Logger

Engine calls and journal loads/saves are logged as structured events.
The audit logger only writes to the local structured log; it keeps no
other state. structlog is configured on first use unless the
application has already configured it.
"""

import logging
from typing import Optional

import structlog

from ledgerjournal.config import get_settings
from ledgerjournal.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


LOGGER_NAME = "ledgerjournal"


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure structlog for local JSON logging.

    Does nothing when structlog is already configured, so an application
    that sets up its own logging keeps it. Pass force=True to replace it.

    Args:
        level: Level for the "ledgerjournal" logger; defaults to LEDGER_LOG_LEVEL
        force: Configure even if structlog is already configured
    """
    if structlog.is_configured() and not force:
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger(LOGGER_NAME).setLevel((level or get_settings().log_level).upper())


class AuditLogger:
    """
    Central audit logging service.

    Routes each event to the structlog method matching its severity.
    """

    def __init__(self, logger_name: str = f"{LOGGER_NAME}.audit"):
        configure_logging()
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_engine_invoked(self, command: list[str]) -> None:
        self.log(AuditEventBuilder.engine_invoked(command))

    def log_engine_failed(
        self,
        command: list[str],
        error_message: str,
        returncode: Optional[int] = None,
    ) -> None:
        self.log(AuditEventBuilder.engine_failed(command, error_message, returncode))

    def log_journal_loaded(self, path: str, transaction_count: int) -> None:
        self.log(AuditEventBuilder.journal_loaded(path, transaction_count))

    def log_journal_saved(self, path: str, transaction_count: int) -> None:
        self.log(AuditEventBuilder.journal_saved(path, transaction_count))

    def log_pretty_print_failed(self, path: Optional[str], error_message: str) -> None:
        """Log that the engine could not format a journal."""
        self.log(AuditEventBuilder.pretty_print_failed(path, error_message))
