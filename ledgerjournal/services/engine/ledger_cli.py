"""
ledger-cli Engine

Runs the ledger executable as a subprocess. There is no timeout and no
retry: a hanging ledger process blocks the caller.
"""

import subprocess
from typing import Optional, Sequence

from ledgerjournal.audit import AuditLogger
from ledgerjournal.config import get_settings
from ledgerjournal.errors import EngineInvocationError
from ledgerjournal.services.engine.interface import LedgerEngineInterface


class LedgerCliEngine(LedgerEngineInterface):
    """
    Engine backed by the ledger command line program.

    The binary defaults to LEDGER_BINARY from settings.
    """

    def __init__(
        self,
        binary: Optional[str] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._binary = binary or get_settings().binary
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def binary(self) -> str:
        return self._binary

    def run(self, args: Sequence[str], stdin: Optional[str] = None) -> str:
        command = [self._binary, *args]
        self._audit_logger.log_engine_invoked(command)

        stdin_kwargs = (
            {"input": stdin} if stdin is not None else {"stdin": subprocess.DEVNULL}
        )
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
                **stdin_kwargs,
            )
        except OSError as e:
            self._audit_logger.log_engine_failed(command, str(e))
            raise EngineInvocationError(
                f"Could not run {self._binary}", stderr=str(e)
            ) from e

        if result.returncode != 0:
            self._audit_logger.log_engine_failed(
                command, result.stderr, result.returncode
            )
            raise EngineInvocationError(
                f"{self._binary} exited with status {result.returncode}",
                stderr=result.stderr,
                returncode=result.returncode,
            )
        return result.stdout
