"""Tests for settings loading and logging setup."""

import json
import logging
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from rentledger.config import AppSettings, BillingSettings, ReceiptSettings
from rentledger.entry.workflow import TransactionEntryWorkflow
from rentledger.logging import get_logger, render_ledger_values, setup_logging
from rentledger.main import build_workflow
from rentledger.models import Property, UtilityCategory


class TestSettings:
    """Tests for settings defaults, env prefixes and validation."""

    def test_defaults(self) -> None:
        """Defaults match the documented configuration."""
        settings = AppSettings()
        assert settings.billing.rate_fallback == "current_rate"
        assert settings.billing.default_duration_weeks == 1
        assert settings.receipts.date_convention == "day-first"
        assert settings.receipts.century_prefix == "20"
        assert settings.imports.default_status == "PAID"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each settings group reads its own env prefix."""
        monkeypatch.setenv("RECEIPT_DATE_CONVENTION", "month-first")
        monkeypatch.setenv("BILLING_RATE_FALLBACK", "earliest_entry")
        assert ReceiptSettings().date_convention == "month-first"
        assert BillingSettings().rate_fallback == "earliest_entry"

    def test_rejects_unknown_convention(self) -> None:
        """Only day-first and month-first are accepted."""
        with pytest.raises(ValidationError):
            ReceiptSettings(date_convention="year-first")  # type: ignore[arg-type]

    def test_rejects_bad_century(self) -> None:
        """The century prefix must be two digits."""
        with pytest.raises(ValidationError):
            ReceiptSettings(century_prefix="2")

    def test_rejects_out_of_range_default_duration(self) -> None:
        """The default duration must stay within 1-5 weeks."""
        with pytest.raises(ValidationError):
            BillingSettings(default_duration_weeks=6)


class TestLogging:
    """Tests for logging setup and ledger value rendering."""

    def test_setup_sets_root_level(self) -> None:
        """Root logger gets the requested level and a single handler."""
        setup_logging("DEBUG", log_format="json")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_defaults_to_info(self) -> None:
        """An unrecognised level name falls back to INFO."""
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_get_logger_logs_without_error(self) -> None:
        """A module logger can emit after setup."""
        setup_logging("INFO")
        get_logger("rentledger.test").info("test_event", key="value")

    def test_ledger_values_rendered_as_strings(self) -> None:
        """Decimal, date and Enum values become plain strings."""
        event = render_ledger_values(
            None,
            "info",
            {
                "event": "rent_quoted",
                "rate": Decimal("130.00"),
                "start": date(2024, 3, 1),
                "utility_type": UtilityCategory.WATER,
                "weeks": 2,
                "tenant": None,
            },
        )
        assert event == {
            "event": "rent_quoted",
            "rate": "130.00",
            "start": "2024-03-01",
            "utility_type": "WATER",
            "weeks": 2,
            "tenant": None,
        }

    def test_json_output_carries_plain_amounts(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON log lines show amounts and dates as written, not as reprs."""
        setup_logging("INFO", log_format="json")
        get_logger("rentledger.test").info("rent_quoted", rate=Decimal("130.00"), start=date(2024, 3, 1))

        line = [ln for ln in capsys.readouterr().err.splitlines() if ln.strip()][-1]
        payload = json.loads(line)
        assert payload["event"] == "rent_quoted"
        assert payload["rate"] == "130.00"
        assert payload["start"] == "2024-03-01"


class TestBuildWorkflow:
    """Tests for application wiring."""

    def test_builds_with_explicit_settings(self, mock_settings: AppSettings, ultimo: Property) -> None:
        """Explicit settings drive logging and the workflow."""
        workflow = build_workflow(mock_settings)

        assert isinstance(workflow, TransactionEntryWorkflow)
        assert logging.getLogger().level == logging.DEBUG
        assert workflow.quote_rent(ultimo, None, "2024-06-01").rate == Decimal("120")
