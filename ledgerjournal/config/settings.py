"""
Configuration Management for ledgerjournal

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here. Only the ledger
binary, the default locale and the log level are configurable; everything
else is passed explicitly by callers.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Settings for talking to the ledger engine.

    Loads configuration from LEDGER_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    binary: str = Field(
        default="ledger",
        min_length=1,
        description="Name or path of the ledger-cli executable"
    )
    locale: str = Field(
        default="en",
        description="Locale preset used when no options are passed (en, de)"
    )
    log_level: str = Field(
        default="INFO",
        description="Level for the ledgerjournal logger"
    )

    @field_validator('locale')
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names only."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get ledger settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
