"""Transaction-entry workflow: rent quotes, bill composition, receipt pre-fill."""

from rentledger.entry.workflow import TransactionEntryWorkflow, merge_extracted

__all__ = ["TransactionEntryWorkflow", "merge_extracted"]
