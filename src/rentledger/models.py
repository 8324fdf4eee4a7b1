"""Shared data models for the rent ledger.

CRITICAL: All monetary values use Decimal. Never use float for rents, bills, or totals.
Calendar dates are ``datetime.date``; stored period boundaries are ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of ledger entry."""

    RENT = "RENT"
    BILL = "BILL"


class PaymentStatus(str, Enum):
    """Settlement status of a transaction."""

    PAID = "PAID"
    UNPAID = "UNPAID"


class UtilityCategory(str, Enum):
    """Bill category, also the classification target for receipt text."""

    ELECTRICITY = "ELECTRICITY"
    GAS = "GAS"
    WATER = "WATER"
    WIFI = "WIFI"
    COUNCIL = "COUNCIL"
    REPAIRS = "REPAIRS"
    OTHER = "OTHER"


@dataclass(frozen=True, order=True)
class RateChangeEntry:
    """One historical rent-rate change, effective from ``effective_date`` onward.

    Ordering compares ``effective_date`` first, then ``amount``.
    """

    effective_date: date
    amount: Decimal


class RateHistory:
    """Append-only rent-rate log kept sorted by effective date on write.

    Entries sharing both amount and effective date are stored once.
    Two different amounts on the same date are both kept; lookups treat the
    larger-sorting one as the later change.
    """

    def __init__(self, entries: Iterable[RateChangeEntry] = ()) -> None:
        self._entries: list[RateChangeEntry] = []
        for entry in entries:
            self.add(entry)

    def add(self, entry: RateChangeEntry) -> bool:
        """Insert ``entry`` in effective-date order. Returns False for a duplicate."""
        idx = bisect.bisect_left(self._entries, entry)
        if idx < len(self._entries) and self._entries[idx] == entry:
            return False
        self._entries.insert(idx, entry)
        return True

    def record(self, amount: Decimal, effective_date: date) -> bool:
        return self.add(RateChangeEntry(effective_date=effective_date, amount=amount))

    @property
    def entries(self) -> list[RateChangeEntry]:
        """Entries oldest-first (a copy)."""
        return list(self._entries)

    @property
    def earliest(self) -> RateChangeEntry | None:
        return self._entries[0] if self._entries else None

    def __iter__(self) -> Iterator[RateChangeEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RateHistory):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"RateHistory({self._entries!r})"


@dataclass
class Property:
    """A rented property with its effective-dated rent history."""

    id: str
    name: str
    current_rate: Decimal
    rent_history: RateHistory = field(default_factory=RateHistory)
    tenant_names: list[str] = field(default_factory=list)
    address: str | None = None
    paid_up_to: date | None = None

    @property
    def primary_tenant(self) -> str:
        return self.tenant_names[0] if self.tenant_names else ""


@dataclass
class SettlementPeriod:
    """Inclusive date range covered by one rent payment, with its rate.

    When the manual start could not be parsed, ``start``/``end`` are None and
    ``raw_start`` carries the caller's value unchanged so validation can reject it.
    """

    start: date | None
    end: date | None
    weeks: int
    rate: Decimal
    raw_start: str = ""

    @property
    def total(self) -> Decimal:
        return self.rate * Decimal(self.weeks)

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def period_start(self) -> str:
        return self.start.isoformat() if self.start is not None else self.raw_start

    @property
    def period_end(self) -> str:
        return self.end.isoformat() if self.end is not None else self.raw_start


@dataclass
class Transaction:
    """A persisted rent or bill record."""

    id: str
    property_id: str
    type: TransactionType
    date: date
    amount: Decimal
    status: PaymentStatus = PaymentStatus.PAID
    property_name: str = ""
    tenant: str = ""
    notes: str = ""
    period_start: str | None = None  # YYYY-MM-DD
    period_end: str | None = None  # YYYY-MM-DD
    duration_weeks: int | None = None
    rate: Decimal | None = None
    utility_type: UtilityCategory | None = None
    file_url: str | None = None


@dataclass(frozen=True)
class ExtractedFields:
    """Best-effort hints recovered from receipt text. Every field is optional."""

    amount: Decimal | None = None
    date: date | None = None
    property_id: str | None = None
    utility_category: UtilityCategory | None = None


@dataclass
class BillDraft:
    """In-progress bill form state that receipt extraction pre-fills."""

    amount: Decimal | None = None
    date: date | None = None
    property_id: str | None = None
    utility_category: UtilityCategory = UtilityCategory.ELECTRICITY
    notes: str = ""
    file_url: str | None = None
