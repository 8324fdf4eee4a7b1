"""Shared test fixtures for the rent ledger."""

from datetime import date
from decimal import Decimal

import pytest

from rentledger.config import AppSettings, BillingSettings, ReceiptSettings
from rentledger.models import Property, RateChangeEntry, RateHistory


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults (day-first dates, current-rate fallback)."""
    return AppSettings(
        log_level="DEBUG",
        billing=BillingSettings(rate_fallback="current_rate", default_duration_weeks=1),
        receipts=ReceiptSettings(date_convention="day-first"),
    )


@pytest.fixture
def ultimo() -> Property:
    """Property with a rate rise from 100 to 120 on 2024-06-01."""
    return Property(
        id="prop-ultimo",
        name="Ultimo Room",
        current_rate=Decimal("130"),
        rent_history=RateHistory(
            [
                RateChangeEntry(effective_date=date(2024, 6, 1), amount=Decimal("120")),
                RateChangeEntry(effective_date=date(2024, 1, 1), amount=Decimal("100")),
            ]
        ),
        tenant_names=["Jane Doe", "Sam Lee"],
        address="12 Harris St",
    )


@pytest.fixture
def glebe() -> Property:
    """Property with no rate history."""
    return Property(
        id="prop-glebe",
        name="Glebe House",
        current_rate=Decimal("450"),
        address="3 Glebe Point Rd",
    )


@pytest.fixture
def properties(ultimo: Property, glebe: Property) -> list[Property]:
    return [ultimo, glebe]
