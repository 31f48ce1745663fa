"""
Error Hierarchy for ledgerjournal

Every failure the package detects is raised as a subclass of LedgerError,
so callers can catch one type for "anything the journal layer rejected".

DESIGN DECISION: Errors are raised where they are detected and are never
corrected silently. The only place an error is absorbed is journal
pretty-printing, which falls back to unformatted text.
"""

from typing import Optional


class LedgerError(Exception):
    """Base exception for ledger journal errors."""
    pass


class JournalNotFoundError(LedgerError, FileNotFoundError):
    """The journal file to load does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} not found")


class NoAssociatedPathError(LedgerError):
    """The journal was not read from a path, so there is nothing to save to."""
    pass


class UnsupportedLocaleError(LedgerError):
    """No formatting preset exists for the requested locale."""

    def __init__(self, locale: str, supported: list[str]):
        self.locale = locale
        self.supported = supported
        super().__init__(
            f"Unknown locale for ledger options: {locale}, "
            f"supported are {', '.join(supported)}"
        )


class MalformedAmountError(LedgerError):
    """Text could not be read as a decimal amount."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed amount: {text!r}")


class MalformedDateError(LedgerError):
    """Text did not match the expected date pattern."""

    def __init__(self, text: str, date_format: str):
        self.text = text
        self.date_format = date_format
        super().__init__(f"Malformed date: {text!r} does not match {date_format!r}")


class CurrencyMismatchError(LedgerError):
    """A balance assignment uses a different commodity than its posting."""

    def __init__(self, currency: str, balance_currency: str):
        self.currency = currency
        self.balance_currency = balance_currency
        super().__init__(
            f"Posting currency {currency} doesn't match "
            f"assignment currency {balance_currency}"
        )


class UnknownStateError(LedgerError):
    """A transaction state literal is neither cleared nor pending."""

    def __init__(self, state: Optional[str]):
        self.state = state
        super().__init__(f"Unknown transaction state: {state!r}")


class MalformedXmlError(LedgerError):
    """Engine XML is unparseable or lacks a required element."""
    pass


class EngineInvocationError(LedgerError):
    """
    The ledger engine could not be launched or exited with an error.

    Carries the captured standard error so callers can show what the
    engine complained about.
    """

    def __init__(
        self,
        message: str,
        stderr: str = "",
        returncode: Optional[int] = None,
    ):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"{message}: {stderr}" if stderr else message)
