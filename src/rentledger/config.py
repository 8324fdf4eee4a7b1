"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingSettings(BaseSettings):
    """Rent settlement parameters."""

    model_config = SettingsConfigDict(env_prefix="BILLING_")

    # Applied when no rate-history entry is dated on or before the period start
    rate_fallback: Literal["current_rate", "earliest_entry"] = "current_rate"
    default_duration_weeks: int = Field(default=1, ge=1, le=5)
    default_status: Literal["PAID", "UNPAID"] = "PAID"


class ReceiptSettings(BaseSettings):
    """Receipt text extraction parameters.

    ``date_convention`` decides how an ambiguous ``A/B/C`` date is read:
    day-first treats A as the day, month-first treats A as the month.
    All fields configurable via RECEIPT_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="RECEIPT_")

    date_convention: Literal["day-first", "month-first"] = "day-first"
    century_prefix: str = "20"  # two-digit years are expanded with this
    currency_symbols: str = "$€£"

    @field_validator("century_prefix")
    @classmethod
    def _two_digit_century(cls, v: str) -> str:
        if len(v) != 2 or not v.isdigit():
            raise ValueError("century_prefix must be two digits")
        return v


class ImportSettings(BaseSettings):
    """Spreadsheet import defaults."""

    model_config = SettingsConfigDict(env_prefix="IMPORT_")

    default_property_name: str = "Unknown"
    default_status: Literal["PAID", "UNPAID"] = "PAID"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    billing: BillingSettings = BillingSettings()
    receipts: ReceiptSettings = ReceiptSettings()
    imports: ImportSettings = ImportSettings()
