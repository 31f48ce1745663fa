"""Tests for LedgerOptions locale formatting and engine flags."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from ledgerjournal.errors import (
    MalformedAmountError,
    MalformedDateError,
    UnsupportedLocaleError,
)
from ledgerjournal.models import LedgerOptions, get_default_options
from ledgerjournal.services.engine import LedgerEngineInterface


class TestPresets:
    """Tests for the locale presets."""

    def test_en_preset(self, en_options):
        assert en_options.date_format == "%Y/%m/%d"
        assert en_options.decimal_separator == "."

    def test_de_preset(self, de_options):
        assert de_options.date_format == "%d.%m.%Y"
        assert de_options.decimal_separator == ","

    def test_tag_is_case_insensitive(self):
        assert LedgerOptions.for_locale(" DE ") == LedgerOptions.for_locale("de")

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocaleError, match="fr"):
            LedgerOptions.for_locale("fr")

    def test_options_are_immutable(self, en_options):
        with pytest.raises(ValidationError):
            en_options.decimal_comma = True

    def test_custom_options(self):
        options = LedgerOptions(date_format="%d/%m/%Y", decimal_comma=True)
        assert options.format_date(date(2020, 3, 4)) == "04/03/2020"
        assert options.format_amount(Decimal("1.5")) == "1,50"


class TestAmounts:
    """Tests for amount parsing and formatting."""

    def test_format_values_en(self, en_options):
        assert en_options.format(Decimal("1234.56")) == "1234.56"
        assert en_options.format(date(2020, 3, 4)) == "2020/03/04"
        assert en_options.parse_amount("1234.56") == Decimal("1234.56")

    def test_format_values_de(self, de_options):
        assert de_options.format(Decimal("1234.56")) == "1234,56"
        assert de_options.format(date(2020, 3, 4)) == "04.03.2020"
        assert de_options.parse_amount("1234,56") == Decimal("1234.56")

    def test_format_always_two_decimals(self, en_options):
        assert en_options.format_amount(Decimal("1000")) == "1000.00"
        assert en_options.format_amount(Decimal("-37.5")) == "-37.50"
        assert en_options.format_amount(Decimal("1234567.89")) == "1234567.89"

    def test_de_strips_thousands_separators(self, de_options):
        assert de_options.parse_amount("1.234.567,89") == Decimal("1234567.89")

    def test_format_rejects_other_types(self, en_options):
        with pytest.raises(TypeError):
            en_options.format(1.5)

    @pytest.mark.parametrize(
        "text", ["", "abc", "1,234.56", "NaN", "Infinity", "1_000", "1e3", "\u0661\u0662"]
    )
    def test_malformed_amount_en(self, en_options, text):
        with pytest.raises(MalformedAmountError):
            en_options.parse_amount(text)

    def test_malformed_amount_de(self, de_options):
        with pytest.raises(MalformedAmountError):
            de_options.parse_amount("12,34,56")

    def test_malformed_amount_de_rejects_underscores(self, de_options):
        with pytest.raises(MalformedAmountError):
            de_options.parse_amount("1_000,50")

    def test_parse_amount_keeps_sign_and_scale(self, en_options):
        assert en_options.parse_amount(" +12.300 ") == Decimal("12.300")
        assert str(en_options.parse_amount("-0.10")) == "-0.10"

    @pytest.mark.parametrize("locale", ["en", "de"])
    @pytest.mark.parametrize("value", ["0", "0.01", "-0.10", "1000", "-1234.56", "987654321.99"])
    def test_amount_symmetry(self, locale, value):
        options = LedgerOptions.for_locale(locale)
        assert options.parse_amount(options.format_amount(Decimal(value))) == Decimal(value)


class TestDates:
    """Tests for date parsing and formatting."""

    @pytest.mark.parametrize("locale", ["en", "de"])
    @pytest.mark.parametrize(
        "value",
        [date(2010, 12, 1), date(2020, 2, 29), date(1999, 1, 31), date(999, 1, 2), date(1, 1, 1)],
    )
    def test_date_symmetry(self, locale, value):
        options = LedgerOptions.for_locale(locale)
        assert options.parse_date(options.format_date(value)) == value

    def test_year_below_1000_is_zero_padded(self, en_options, de_options):
        assert en_options.format_date(date(999, 1, 2)) == "0999/01/02"
        assert de_options.format_date(date(42, 12, 31)) == "31.12.0042"

    def test_parse_date_returns_date(self, en_options):
        parsed = en_options.parse_date("2020/03/04")
        assert parsed == date(2020, 3, 4)
        assert not isinstance(parsed, datetime)

    def test_malformed_date(self, de_options):
        with pytest.raises(MalformedDateError, match="2020/03/04"):
            de_options.parse_date("2020/03/04")


class TestEngineFlags:
    """Tests for the ledger command line built from options."""

    def test_en_flags(self, en_options):
        assert en_options.engine_flags() == [
            "--args-only",
            "--date-format", "%Y/%m/%d",
            "--input-date-format", "%Y/%m/%d",
        ]

    def test_de_flags_add_decimal_comma(self, de_options):
        assert de_options.engine_flags()[-1] == "--decimal-comma"

    def test_run_prepends_flags(self, de_options):
        engine = MagicMock(spec=LedgerEngineInterface)
        engine.run.return_value = "output"

        result = de_options.run(["-f", "-", "print"], stdin="text", engine=engine)

        assert result == "output"
        engine.run.assert_called_once_with(
            [*de_options.engine_flags(), "-f", "-", "print"], stdin="text"
        )

    def test_run_splits_string_args(self, en_options):
        engine = MagicMock(spec=LedgerEngineInterface)
        engine.run.return_value = ""

        en_options.run("-f 'my books.ledger' -p 2020 xml", engine=engine)

        args = engine.run.call_args.args[0]
        assert args[-5:] == ["-f", "my books.ledger", "-p", "2020", "xml"]


class TestDefaultOptions:
    """Tests for the settings-driven default options."""

    def test_default_is_en(self):
        assert get_default_options() == LedgerOptions.for_locale("en")

    def test_default_follows_ledger_locale(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOCALE", "de")
        assert get_default_options() == LedgerOptions.for_locale("de")

    def test_unsupported_default_locale(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOCALE", "fr")
        with pytest.raises(UnsupportedLocaleError):
            get_default_options()
