"""Rent billing: settlement period boundaries and effective-dated rate lookup."""

from rentledger.billing.period import (
    MAX_DURATION_WEEKS,
    MIN_DURATION_WEEKS,
    PeriodResolver,
    next_period_start,
    parse_iso_date,
    period_end_for,
)
from rentledger.billing.rate_history import find_effective_entry, resolve_rate

__all__ = [
    "MAX_DURATION_WEEKS",
    "MIN_DURATION_WEEKS",
    "PeriodResolver",
    "find_effective_entry",
    "next_period_start",
    "parse_iso_date",
    "period_end_for",
    "resolve_rate",
]
