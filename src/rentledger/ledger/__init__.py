"""Ledger views and spreadsheet import over saved transactions."""

from rentledger.ledger.importer import ImportedRow, import_rows, map_row, resolve_import_date
from rentledger.ledger.summary import (
    ExpenseSplit,
    MonthlyTotal,
    describe_period_length,
    expense_split,
    filter_transactions,
    latest_rent_transaction,
    monthly_totals,
    property_history,
)

__all__ = [
    "ExpenseSplit",
    "ImportedRow",
    "MonthlyTotal",
    "describe_period_length",
    "expense_split",
    "filter_transactions",
    "import_rows",
    "latest_rent_transaction",
    "map_row",
    "monthly_totals",
    "property_history",
    "resolve_import_date",
]
