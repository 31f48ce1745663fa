"""
Locale Formatting Options

LedgerOptions converts amounts and dates between Python values and the
text a given locale uses, and builds the ledger command line flags that
make the engine read and write the same text.

DESIGN DECISION: There is no mutable global default. Codecs take an
explicit options argument; when it is omitted they use
get_default_options(), which is built once from settings and is
immutable. Call get_default_options.cache_clear() after changing
LEDGER_LOCALE.
"""

import re
import shlex
from datetime import date, datetime
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from ledgerjournal.config import get_settings
from ledgerjournal.errors import (
    MalformedAmountError,
    MalformedDateError,
    UnsupportedLocaleError,
)

if TYPE_CHECKING:
    from ledgerjournal.services.engine import LedgerEngineInterface


# plain ASCII decimal literal, after any decimal comma is normalised
AMOUNT_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

LOCALE_PRESETS: dict[str, dict] = {
    "en": {"date_format": "%Y/%m/%d", "decimal_comma": False},
    "de": {"date_format": "%d.%m.%Y", "decimal_comma": True},
}


class LedgerOptions(BaseModel):
    """
    Date and decimal formatting rules for one locale.

    Instances are immutable; use for_locale() for the presets or construct
    one directly for a custom pattern.
    """
    model_config = ConfigDict(frozen=True)

    date_format: str = Field(
        ...,
        min_length=2,
        description="strftime pattern, also passed to ledger as --date-format"
    )
    decimal_comma: bool = Field(
        default=False,
        description="Use ',' as decimal separator (ledger --decimal-comma)"
    )

    @classmethod
    def for_locale(cls, locale: str) -> "LedgerOptions":
        """
        Return the preset options for a locale tag ('en' or 'de').

        Raises:
            UnsupportedLocaleError: For any other tag
        """
        preset = LOCALE_PRESETS.get(str(locale).strip().lower())
        if preset is None:
            raise UnsupportedLocaleError(str(locale), sorted(LOCALE_PRESETS))
        return cls(**preset)

    @property
    def decimal_separator(self) -> str:
        return "," if self.decimal_comma else "."

    def parse_amount(self, text: str) -> Decimal:
        """
        Parse a decimal amount written in this locale.

        With a decimal comma, dots are thousands separators and are dropped
        before the comma becomes the decimal point.
        """
        raw = text.strip()
        if self.decimal_comma:
            raw = raw.replace(".", "").replace(",", ".")
        if not AMOUNT_PATTERN.fullmatch(raw):
            raise MalformedAmountError(text)
        return Decimal(raw)

    def format_amount(self, amount: Decimal) -> str:
        """Render an amount with two decimals and no thousands grouping."""
        text = format(amount, ".2f")
        if self.decimal_comma:
            text = text.replace(".", ",")
        return text

    def parse_date(self, text: str) -> date:
        try:
            return datetime.strptime(text.strip(), self.date_format).date()
        except ValueError as exc:
            raise MalformedDateError(text, self.date_format) from exc

    def format_date(self, value: date) -> str:
        # strftime does not zero-pad years below 1000 on every platform
        pattern = self.date_format.replace("%Y", f"{value.year:04d}")
        return value.strftime(pattern)

    def format(self, value: Union[date, Decimal]) -> str:
        """Format a date or an amount according to these options."""
        if isinstance(value, date):
            return self.format_date(value)
        if isinstance(value, Decimal):
            return self.format_amount(value)
        raise TypeError(f"Unknown value type {type(value).__name__}")

    def engine_flags(self) -> list[str]:
        """Flags that make ledger read and write this locale's formats."""
        flags = [
            "--args-only",
            "--date-format", self.date_format,
            "--input-date-format", self.date_format,
        ]
        if self.decimal_comma:
            flags.append("--decimal-comma")
        return flags

    def run(
        self,
        args: Union[str, Sequence[str]],
        stdin: Optional[str] = None,
        engine: Optional["LedgerEngineInterface"] = None,
    ) -> str:
        """
        Run the ledger engine with these options and return its stdout.

        Args:
            args: Extra arguments, as a sequence or a shell-quoted string
            stdin: Text passed on standard input
            engine: Engine to use; defaults to the ledger executable

        Raises:
            EngineInvocationError: If ledger cannot start or exits non-zero
        """
        if isinstance(args, str):
            args = shlex.split(args)
        if engine is None:
            from ledgerjournal.services.engine import LedgerCliEngine
            engine = LedgerCliEngine()
        return engine.run([*self.engine_flags(), *args], stdin=stdin)


@lru_cache()
def get_default_options() -> LedgerOptions:
    """Options for the configured LEDGER_LOCALE (cached)."""
    return LedgerOptions.for_locale(get_settings().locale)
