"""
Abstract Ledger Engine Interface

The journal layer never computes ledger semantics itself. It asks an
engine to dump a journal as XML and to pretty-print journal text. This
interface is the only contact point, so tests and other callers can put
a stub in place of the ledger executable.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class LedgerEngineInterface(ABC):
    """
    Abstract interface for running the external accounting engine.
    """

    @abstractmethod
    def run(self, args: Sequence[str], stdin: Optional[str] = None) -> str:
        """
        Run the engine and return its standard output.

        Args:
            args: Complete argument list, option flags included
            stdin: Text to pass on standard input, if any

        Returns:
            Captured standard output

        Raises:
            EngineInvocationError: If the engine cannot be launched or
                exits with a non-zero status
        """
        pass
