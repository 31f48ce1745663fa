"""
Transaction Model

A transaction is a dated, cleared or pending group of postings under one
payee. Text form:

    2010/12/20 ! Organic Co-op
        ; Description: Weekly shopping
        Expenses:Food:Groceries                  $ 37.50
        Assets:Checking                         $ -37.50 = $ 962.50

DESIGN DECISION: Metadata is written in insertion order, for
transactions and postings alike. The text of a transaction has no
trailing newline; the journal adds separators.
"""

import datetime
from enum import Enum
from typing import Iterable, Optional, Union
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ledgerjournal.errors import MalformedXmlError, UnknownStateError
from ledgerjournal.models.options import LedgerOptions, get_default_options
from ledgerjournal.models.posting import Posting
from ledgerjournal.models.xml_helpers import parse_metadata, require_text


# ledger always writes XML dates in its "written" format
XML_DATE_FORMAT = "%Y/%m/%d"

INDENT = "    "

AccountSelector = Union[str, Iterable[str]]


class TransactionState(str, Enum):
    """Clearing state of a transaction."""
    CLEARED = "cleared"
    PENDING = "pending"

    @property
    def glyph(self) -> str:
        return "*" if self is TransactionState.CLEARED else "!"


def as_account_list(account: AccountSelector) -> list[str]:
    """Accept one account name or any collection of names."""
    if isinstance(account, str):
        return [account]
    return list(account)


class Transaction(BaseModel):
    """
    A dated group of postings under one payee.

    Equality is structural; postings are compared in order, metadata as
    a mapping.
    """
    model_config = ConfigDict(validate_assignment=True)

    date: datetime.date
    state: TransactionState = TransactionState.CLEARED
    payee: str = Field(..., min_length=1)
    metadata: dict[str, str] = Field(default_factory=dict)
    postings: list[Posting] = Field(default_factory=list)

    @classmethod
    def parse_xml(
        cls,
        node: Element,
        options: Optional[LedgerOptions] = None,
    ) -> "Transaction":
        """
        Build a transaction from a ledger XML <transaction> element.

        Raises:
            UnknownStateError: If the state attribute is missing or is not
                cleared/pending
            MalformedDateError: If the date matches neither the options
                pattern nor ledger's written format
            MalformedXmlError: If a required element is missing
        """
        options = options or get_default_options()

        raw_state = node.get("state")
        try:
            state = TransactionState(raw_state)
        except ValueError as exc:
            raise UnknownStateError(raw_state) from exc

        try:
            return cls(
                date=_parse_xml_date(require_text(node, "date"), options),
                state=state,
                payee=require_text(node, "payee"),
                metadata=parse_metadata(node),
                postings=[
                    Posting.parse_xml(posting, options)
                    for posting in node.findall("postings/posting")
                ],
            )
        except ValidationError as exc:
            raise MalformedXmlError(f"Invalid transaction: {exc}") from exc

    def to_text(self, options: Optional[LedgerOptions] = None) -> str:
        options = options or get_default_options()
        lines = [f"{options.format_date(self.date)} {self.state.glyph} {self.payee}"]
        lines += [f"{INDENT}; {key}: {value}" for key, value in self.metadata.items()]
        for posting in self.postings:
            lines += [INDENT + line for line in posting.to_text(options).split("\n")]
        return "\n".join(lines)

    def posting_for_account(self, account: AccountSelector) -> Optional[Posting]:
        """
        Return the first posting for the first candidate account that has one.

        Candidates are tried in the order given; for each, postings are
        scanned in stored order. Returns None if no candidate matches.
        """
        for candidate in as_account_list(account):
            for posting in self.postings:
                if posting.account == candidate:
                    return posting
        return None

    def __str__(self) -> str:
        return self.to_text()


def _parse_xml_date(text: str, options: LedgerOptions) -> datetime.date:
    try:
        return datetime.datetime.strptime(text.strip(), XML_DATE_FORMAT).date()
    except ValueError:
        return options.parse_date(text)
