"""Spreadsheet row import.

Maps loosely-labelled spreadsheet rows (as produced by a CSV/Excel reader,
one dict per row) onto Transaction records. Column headers are matched
case-insensitively by substring, so "Payment Date" and "date" both supply
the date.
"""

import re
import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from rentledger.billing.period import parse_iso_date
from rentledger.config import ImportSettings
from rentledger.logging import get_logger
from rentledger.models import PaymentStatus, Property, Transaction, TransactionType

logger = get_logger(__name__)

_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")


@dataclass
class ImportedRow:
    """One spreadsheet row after header mapping, before date resolution."""

    raw_date: Any
    type: TransactionType
    amount: Decimal
    notes: str
    property_name: str
    property_id: str
    tenant: str


def _find_value(row: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Value of the first column whose header contains any of ``keys``."""
    for header, value in row.items():
        lowered = str(header).lower()
        if any(key in lowered for key in keys):
            return value
    return None


def _parse_amount(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    cleaned = _NON_AMOUNT_CHARS.sub("", str(value))
    try:
        return Decimal(cleaned) if cleaned else Decimal("0")
    except InvalidOperation:
        return Decimal("0")


def map_row(
    row: Mapping[str, Any],
    properties: Sequence[Property],
    settings: ImportSettings | None = None,
) -> ImportedRow:
    """Map one raw spreadsheet row onto transaction fields.

    Missing type defaults to RENT; anything but "BILL" is RENT. The amount
    keeps only digits and dots. The property is matched by exact,
    case-insensitive name.
    """
    settings = settings or ImportSettings()

    raw_type = _find_value(row, ["type"])
    txn_type = (
        TransactionType.BILL
        if raw_type is not None and str(raw_type).strip().upper() == "BILL"
        else TransactionType.RENT
    )
    property_name = _find_value(row, ["property"]) or settings.default_property_name
    matched = next(
        (p for p in properties if p.name.lower() == str(property_name).lower()),
        None,
    )

    return ImportedRow(
        raw_date=_find_value(row, ["date", "payment"]),
        type=txn_type,
        amount=_parse_amount(_find_value(row, ["amount"])),
        notes=str(_find_value(row, ["notes", "description"]) or ""),
        property_name=str(property_name),
        property_id=matched.id if matched is not None else "",
        tenant=str(_find_value(row, ["tenant"]) or ""),
    )


def resolve_import_date(raw: Any, today: date) -> date:
    """Use ``raw`` if it is (or parses as) a date, otherwise ``today``."""
    if isinstance(raw, (str, date)):
        parsed = parse_iso_date(raw)
        if parsed is not None:
            return parsed
    return today


def import_rows(
    rows: Iterable[Mapping[str, Any]],
    properties: Sequence[Property],
    today: date,
    settings: ImportSettings | None = None,
) -> list[Transaction]:
    """Convert spreadsheet rows into Transaction records.

    Args:
        rows: Raw rows, one mapping of header -> cell value per row.
        properties: Known properties for name matching.
        today: Substitute date for rows without a usable date.
        settings: Import defaults (status, placeholder property name).

    Returns:
        One Transaction per input row, in input order.
    """
    settings = settings or ImportSettings()
    transactions = []
    for row in rows:
        mapped = map_row(row, properties, settings)
        transactions.append(
            Transaction(
                id=str(uuid.uuid4()),
                property_id=mapped.property_id,
                property_name=mapped.property_name,
                type=mapped.type,
                date=resolve_import_date(mapped.raw_date, today),
                amount=mapped.amount,
                status=PaymentStatus(settings.default_status),
                tenant=mapped.tenant,
                notes=mapped.notes,
            )
        )

    unmatched = sum(1 for t in transactions if not t.property_id)
    logger.info("rows_imported", count=len(transactions), unmatched_properties=unmatched)
    return transactions
