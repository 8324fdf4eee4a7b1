"""Custom exceptions for the rent ledger.

Workflow-level exceptions live here to avoid circular imports between
the billing, receipts and entry packages.
"""


class RentLedgerError(Exception):
    """Base exception for all rent ledger errors."""


class InvalidDurationError(RentLedgerError):
    """Raised when a rent duration falls outside the supported 1-5 weeks."""


class RecognitionError(RentLedgerError):
    """Raised when the text-recognition engine fails to read a receipt image."""


class SubmissionRejected(RentLedgerError):
    """Raised when a composed transaction cannot be submitted as-is."""
