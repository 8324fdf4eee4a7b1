"""Entry point for embedding the rent ledger in a host application.

Component wiring order (in build_workflow):
1. AppSettings (configuration, from environment / .env)
2. Logging setup
3. TransactionEntryWorkflow (PeriodResolver + ReceiptExtractor + injected TextRecognizer)
"""

from rentledger.config import AppSettings
from rentledger.entry.workflow import TransactionEntryWorkflow
from rentledger.logging import get_logger, setup_logging
from rentledger.receipts.recognizer import TextRecognizer


def build_workflow(
    settings: AppSettings | None = None,
    recognizer: TextRecognizer | None = None,
) -> TransactionEntryWorkflow:
    """Load settings, configure logging and return a ready workflow.

    Args:
        settings: Explicit settings; loaded from the environment when None.
        recognizer: OCR engine for receipt scanning (optional).
    """
    settings = settings or AppSettings()
    setup_logging(settings.log_level)

    workflow = TransactionEntryWorkflow(settings, recognizer=recognizer)
    get_logger(__name__).info(
        "workflow_ready",
        rate_fallback=settings.billing.rate_fallback,
        date_convention=settings.receipts.date_convention,
        receipt_scanning=recognizer is not None,
    )
    return workflow
