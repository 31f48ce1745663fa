"""
Ledger Journal

A journal is an ordered list of transactions, optionally backed by a
ledger file. Reading goes through the ledger engine:

    ledger -f <path> [ledger_args] xml  ->  XML  ->  Transaction objects

and writing goes the other way:

    Transaction objects  ->  text  ->  ledger -f - print  ->  file

DESIGN DECISION: A journal keeps the options and engine it was created
with, so loading, formatting and saving all use one locale. Journals are
not safe for concurrent mutation; callers serialize access.
"""

import shlex
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union
from xml.etree import ElementTree

from ledgerjournal.audit import AuditLogger
from ledgerjournal.errors import (
    JournalNotFoundError,
    LedgerError,
    MalformedXmlError,
    NoAssociatedPathError,
)
from ledgerjournal.models import LedgerOptions, Transaction, get_default_options
from ledgerjournal.models.transaction import AccountSelector, as_account_list
from ledgerjournal.services.engine import LedgerCliEngine, LedgerEngineInterface


LedgerArgs = Union[str, Sequence[str], None]


class Journal:
    """
    Reads and writes ledger journal files.

    Usage:
        journal = Journal.load("books.ledger", ledger_args="-p 2020")
        journal.transactions.append(transaction)
        journal.save()
    """

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        ledger_args: LedgerArgs = None,
        transactions: Optional[Iterable[Transaction]] = None,
        options: Optional[LedgerOptions] = None,
        engine: Optional[LedgerEngineInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Create an empty journal, or load one when a path is given.

        Args:
            path: Ledger file to read; also where save() writes
            ledger_args: Extra ledger arguments used when loading, for
                example a period filter like "-p 2020"
            transactions: Initial transactions for an in-memory journal
            options: Locale options; defaults to get_default_options()
            engine: Ledger engine; defaults to the ledger executable
            audit_logger: Audit logger; a default one is created if omitted

        Raises:
            JournalNotFoundError: If path does not exist
            EngineInvocationError: If ledger fails while loading
            MalformedXmlError: If ledger's XML cannot be read
        """
        self.transactions: list[Transaction] = list(transactions or [])
        self._path = Path(path) if path is not None else None
        self._options = options or get_default_options()
        self._engine = engine or LedgerCliEngine()
        self._audit_logger = audit_logger or AuditLogger()

        if self._path is not None:
            if not self._path.exists():
                raise JournalNotFoundError(self._path)
            self._read_ledger(ledger_args)

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        ledger_args: LedgerArgs = None,
        options: Optional[LedgerOptions] = None,
        engine: Optional[LedgerEngineInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
    ) -> "Journal":
        """Load the transactions of a ledger file."""
        return cls(
            path=path,
            ledger_args=ledger_args,
            options=options,
            engine=engine,
            audit_logger=audit_logger,
        )

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def options(self) -> LedgerOptions:
        return self._options

    def to_text(self, pretty_print: bool = True) -> str:
        """
        Return the journal as ledger text.

        Transactions are separated by one blank line and the text ends with
        a single newline. With pretty_print, ledger reformats the text; if
        that fails, the unformatted text is returned and a warning logged.
        """
        text = "\n\n".join(tx.to_text(self._options) for tx in self.transactions)
        if not text:
            return text
        text += "\n"
        if not pretty_print:
            return text

        try:
            formatted = self._options.run(
                ["-f", "-", "print"], stdin=text, engine=self._engine
            )
        except LedgerError as e:
            self._audit_logger.log_pretty_print_failed(
                str(self._path) if self._path else None, str(e)
            )
            return text

        lines = [line.rstrip() for line in formatted.splitlines()]
        return "\n".join(lines).rstrip("\n") + "\n"

    def save(self) -> None:
        """
        Overwrite the file this journal was loaded from.

        Raises:
            NoAssociatedPathError: If the journal was not read from a path
        """
        if self._path is None:
            raise NoAssociatedPathError("Journal was not read from path, cannot save")

        self._path.write_text(self.to_text(pretty_print=True), encoding="utf-8")
        self._audit_logger.log_journal_saved(str(self._path), len(self.transactions))

    def transactions_with_account(self, account: AccountSelector) -> list[Transaction]:
        """Return, in journal order, the transactions posting to any of the accounts."""
        accounts = set(as_account_list(account))
        return [
            tx for tx in self.transactions
            if any(posting.account in accounts for posting in tx.postings)
        ]

    def _read_ledger(self, ledger_args: LedgerArgs) -> None:
        if isinstance(ledger_args, str):
            ledger_args = shlex.split(ledger_args)
        args = ["-f", str(self._path), *(ledger_args or []), "xml"]

        xml_result = self._options.run(args, engine=self._engine)
        try:
            root = ElementTree.fromstring(xml_result)
        except ElementTree.ParseError as e:
            raise MalformedXmlError(f"ledger returned invalid XML: {e}") from e

        self.transactions = [
            Transaction.parse_xml(node, self._options)
            for node in root.iter("transaction")
        ]
        self._audit_logger.log_journal_loaded(str(self._path), len(self.transactions))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Journal):
            return NotImplemented
        return self.transactions == other.transactions

    def __str__(self) -> str:
        return self.to_text()
