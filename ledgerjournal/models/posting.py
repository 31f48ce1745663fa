"""
Posting Model

A posting is one account line of a transaction: the account, the amount
in one commodity, an optional balance assignment and metadata comments.

Text form (amount right-aligned to column 48):

    Assets:Checking                         $ -37.50 = $ 962.50
    ; Description: Example Posting
"""

from decimal import Decimal
from typing import Optional
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ledgerjournal.errors import CurrencyMismatchError, MalformedXmlError
from ledgerjournal.models.options import LedgerOptions, get_default_options
from ledgerjournal.models.xml_helpers import parse_metadata, require, require_text


# Width of a posting line up to the end of the amount
AMOUNT_COLUMN = 48

# ledger ends an account name at two spaces
ACCOUNT_SEPARATOR = "  "


class Posting(BaseModel):
    """
    One account/amount line within a transaction.

    Equality is structural: all fields must be equal, metadata is compared
    as a mapping so its order does not matter.
    """
    model_config = ConfigDict(validate_assignment=True)

    account: str = Field(
        ...,
        min_length=1,
        description="Colon separated account path, e.g. Assets:Checking"
    )
    currency: str = Field(
        ...,
        min_length=1,
        description="Commodity symbol or code, e.g. $ or EUR"
    )
    amount: Decimal
    balance_assignment: Optional[Decimal] = Field(
        default=None,
        description="Asserted account balance after this posting, checked by ledger"
    )
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator('amount', 'balance_assignment', mode='before')
    @classmethod
    def reject_float(cls, v):
        """Amounts must be exact; floats are refused instead of rounded."""
        if isinstance(v, float):
            raise ValueError("amounts must be Decimal, int or str, not float")
        return v

    @classmethod
    def parse_xml(
        cls,
        node: Element,
        options: Optional[LedgerOptions] = None,
    ) -> "Posting":
        """
        Build a posting from a ledger XML <posting> element.

        Raises:
            CurrencyMismatchError: If the balance assignment's commodity
                differs from the posting's commodity
            MalformedAmountError: If a quantity is not a valid amount
            MalformedXmlError: If a required element is missing
        """
        options = options or get_default_options()
        amount_node = require(node, "post-amount/amount")
        currency = require_text(amount_node, "commodity/symbol")

        balance_assignment = None
        balance_node = node.find("balance-assignment")
        if balance_node is not None:
            balance_currency = require_text(balance_node, "commodity/symbol")
            if balance_currency != currency:
                raise CurrencyMismatchError(currency, balance_currency)
            balance_assignment = options.parse_amount(
                require_text(balance_node, "quantity")
            )

        try:
            return cls(
                account=require_text(node, "account/name"),
                currency=currency,
                amount=options.parse_amount(require_text(amount_node, "quantity")),
                balance_assignment=balance_assignment,
                metadata=parse_metadata(node),
            )
        except ValidationError as exc:
            raise MalformedXmlError(f"Invalid posting: {exc}") from exc

    def to_text(self, options: Optional[LedgerOptions] = None) -> str:
        """Render the posting line followed by one '; key: value' line per metadata entry."""
        options = options or get_default_options()
        head = self.account + ACCOUNT_SEPARATOR
        amount_text = f"{self.currency} {options.format_amount(self.amount)}"
        line = head + amount_text.rjust(AMOUNT_COLUMN - len(head))
        if self.balance_assignment is not None:
            line += f" = {self.currency} {options.format_amount(self.balance_assignment)}"

        lines = [line]
        lines += [f"; {key}: {value}" for key, value in self.metadata.items()]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()
