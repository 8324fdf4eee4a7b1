"""Read-side helpers over saved transactions.

Selects the prior settlement for a property, filters and searches the
ledger, builds a property's audit trail, and aggregates rent and bill
totals for the dashboard.

CRITICAL: All totals use Decimal. Never use float.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

from rentledger.billing.period import parse_iso_date
from rentledger.models import Transaction, TransactionType

TypeFilter = Literal["ALL", "RENT", "BILL"]


@dataclass
class MonthlyTotal:
    """Rent and bill totals for one calendar month."""

    month_key: str  # YYYY-MM
    label: str  # e.g. "Mar 2024"
    rent: Decimal = Decimal("0")
    bills: Decimal = Decimal("0")


@dataclass
class ExpenseSplit:
    """Overall rent versus bills totals."""

    rent: Decimal
    bills: Decimal

    @property
    def is_empty(self) -> bool:
        return self.rent == 0 and self.bills == 0


def latest_rent_transaction(
    transactions: Iterable[Transaction],
    property_id: str,
) -> Transaction | None:
    """Return the property's rent transaction with the latest valid ``period_end``."""
    latest: Transaction | None = None
    latest_end: date | None = None
    for txn in transactions:
        if txn.type != TransactionType.RENT or txn.property_id != property_id:
            continue
        end = parse_iso_date(txn.period_end)
        if end is None:
            continue
        if latest_end is None or end > latest_end:
            latest, latest_end = txn, end
    return latest


def describe_period_length(start: str | date | None, end: str | date | None) -> str:
    """Label an inclusive period as weeks plus leftover days, e.g. ``"2W 3D (17 Days)"``.

    Returns an empty string if either boundary is not a valid date or the
    end falls before the start.
    """
    start_d = parse_iso_date(start)
    end_d = parse_iso_date(end)
    if start_d is None or end_d is None:
        return ""

    total_days = (end_d - start_d).days + 1
    if total_days <= 0:
        return ""
    weeks, rem = divmod(total_days, 7)
    parts = []
    if weeks > 0:
        parts.append(f"{weeks}W")
    if rem > 0:
        parts.append(f"{rem}D")
    return f"{' '.join(parts)} ({total_days} Days)"


def filter_transactions(
    transactions: Iterable[Transaction],
    type_filter: TypeFilter = "ALL",
    search: str = "",
) -> list[Transaction]:
    """Filter by transaction type, then by a case-insensitive text search.

    The search matches notes, property name, tenant, or the amount's text.
    """
    result = list(transactions)
    if type_filter != "ALL":
        result = [t for t in result if t.type.value == type_filter]

    needle = search.strip().lower()
    if needle:
        result = [
            t
            for t in result
            if needle in t.notes.lower()
            or needle in t.property_name.lower()
            or needle in t.tenant.lower()
            or (t.amount and needle in str(t.amount))
        ]
    return result


def property_history(transactions: Iterable[Transaction], property_id: str) -> list[Transaction]:
    """Audit trail for one property, newest settlement date first."""
    history = [t for t in transactions if t.property_id == property_id]
    history.sort(key=lambda t: t.date, reverse=True)
    return history


def _shift_month(year: int, month: int, back: int) -> tuple[int, int]:
    y, m = divmod(year * 12 + (month - 1) - back, 12)
    return y, m + 1


def monthly_totals(
    transactions: Iterable[Transaction],
    today: date,
    months: int = 6,
) -> list[MonthlyTotal]:
    """Rent and bill totals for the last ``months`` months, oldest first.

    Transactions outside the window are ignored.
    """
    buckets: dict[str, MonthlyTotal] = {}
    for back in range(months - 1, -1, -1):
        year, month = _shift_month(today.year, today.month, back)
        first = date(year, month, 1)
        key = first.strftime("%Y-%m")
        buckets[key] = MonthlyTotal(month_key=key, label=first.strftime("%b %Y"))

    for txn in transactions:
        bucket = buckets.get(txn.date.strftime("%Y-%m"))
        if bucket is None:
            continue
        if txn.type == TransactionType.RENT:
            bucket.rent += txn.amount
        elif txn.type == TransactionType.BILL:
            bucket.bills += txn.amount

    return list(buckets.values())


def expense_split(transactions: Iterable[Transaction]) -> ExpenseSplit:
    """Total rent and total bills across ``transactions``."""
    rent = Decimal("0")
    bills = Decimal("0")
    for txn in transactions:
        if txn.type == TransactionType.RENT:
            rent += txn.amount
        elif txn.type == TransactionType.BILL:
            bills += txn.amount
    return ExpenseSplit(rent=rent, bills=bills)
