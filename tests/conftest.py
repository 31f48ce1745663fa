"""
Pytest configuration and shared fixtures.

Settings and default options are cached process-wide; the autouse
fixture clears both caches so each test sees its own environment.
"""

from unittest.mock import MagicMock

import pytest

from ledgerjournal.audit import AuditLogger
from ledgerjournal.config import get_settings
from ledgerjournal.models import LedgerOptions, get_default_options
from tests.helpers.fake_ledger import FakeLedgerEngine


@pytest.fixture(autouse=True)
def _reset_cached_settings(monkeypatch):
    """Start every test from the built-in defaults."""
    for name in ("LEDGER_BINARY", "LEDGER_LOCALE", "LEDGER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_default_options.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_options.cache_clear()


@pytest.fixture
def en_options() -> LedgerOptions:
    return LedgerOptions.for_locale("en")


@pytest.fixture
def de_options() -> LedgerOptions:
    return LedgerOptions.for_locale("de")


@pytest.fixture
def fake_engine() -> FakeLedgerEngine:
    return FakeLedgerEngine()


@pytest.fixture
def audit_logger() -> MagicMock:
    return MagicMock(spec=AuditLogger)
