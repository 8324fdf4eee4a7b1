"""Transaction-entry workflow.

Wires the period resolver and the receipt extractor to the entry forms:
quotes and composes rent settlements, composes bills, and pre-fills a bill
draft from a scanned receipt. Persistence and upload stay with the caller;
this module only produces plain Transaction records.

Flow for a receipt scan:
1. Await the injected TextRecognizer (one outstanding request per scan)
2. Any recognizer failure -> RecognitionError, no partial extraction
3. Extract fields from the text
4. Merge present fields into a copy of the draft; absent fields keep the draft's value
"""

import dataclasses
import uuid
from collections.abc import Sequence
from datetime import date

from rentledger.billing.period import PeriodResolver
from rentledger.config import AppSettings
from rentledger.exceptions import RecognitionError, SubmissionRejected
from rentledger.logging import get_logger
from rentledger.models import (
    BillDraft,
    ExtractedFields,
    PaymentStatus,
    Property,
    SettlementPeriod,
    Transaction,
    TransactionType,
)
from rentledger.receipts.extractor import ReceiptExtractor
from rentledger.receipts.recognizer import TextRecognizer

logger = get_logger(__name__)


def merge_extracted(draft: BillDraft, fields: ExtractedFields) -> BillDraft:
    """Return a copy of ``draft`` with every present extracted field applied."""
    updates: dict[str, object] = {}
    if fields.amount is not None:
        updates["amount"] = fields.amount
    if fields.date is not None:
        updates["date"] = fields.date
    if fields.property_id is not None:
        updates["property_id"] = fields.property_id
    if fields.utility_category is not None:
        updates["utility_category"] = fields.utility_category
    return dataclasses.replace(draft, **updates)


class TransactionEntryWorkflow:
    """Builds rent and bill transactions from form input.

    Args:
        settings: Application settings (billing and receipt sections are used).
        recognizer: OCR engine used by ``scan_receipt``. Optional when only
            rent and manual bill entry are needed.
    """

    def __init__(
        self,
        settings: AppSettings,
        recognizer: TextRecognizer | None = None,
    ) -> None:
        self._settings = settings
        self._recognizer = recognizer
        self._resolver = PeriodResolver(rate_fallback=settings.billing.rate_fallback)
        self._extractor = ReceiptExtractor(settings.receipts)

    # ------------------------------------------------------------------
    # Rent
    # ------------------------------------------------------------------

    def quote_rent(
        self,
        prop: Property,
        prior: Transaction | None,
        manual_start: str | date | None,
        weeks: int | None = None,
    ) -> SettlementPeriod:
        """Preview the next settlement period; ``weeks`` defaults from settings."""
        if weeks is None:
            weeks = self._settings.billing.default_duration_weeks
        return self._resolver.resolve(prop, prior, manual_start, weeks)

    def compose_rent(
        self,
        prop: Property,
        prior: Transaction | None,
        manual_start: str | date | None,
        weeks: int | None = None,
        settlement_date: date | None = None,
        tenant: str | None = None,
        notes: str = "",
        status: PaymentStatus | None = None,
    ) -> Transaction:
        """Compose a rent transaction covering the next settlement period.

        Raises:
            InvalidDurationError: If ``weeks`` is outside 1-5.
            SubmissionRejected: If the period start could not be parsed.
        """
        period = self.quote_rent(prop, prior, manual_start, weeks)
        if not period.is_complete:
            logger.warning(
                "rent_submission_rejected",
                property_id=prop.id,
                raw_start=period.raw_start,
            )
            raise SubmissionRejected(f"Invalid period start: {period.raw_start!r}")

        txn = Transaction(
            id=str(uuid.uuid4()),
            property_id=prop.id,
            property_name=prop.name,
            type=TransactionType.RENT,
            date=settlement_date or date.today(),
            amount=period.total,
            status=status or PaymentStatus(self._settings.billing.default_status),
            tenant=tenant if tenant is not None else prop.primary_tenant,
            notes=notes,
            period_start=period.period_start,
            period_end=period.period_end,
            duration_weeks=period.weeks,
            rate=period.rate,
        )
        logger.info(
            "rent_transaction_composed",
            transaction_id=txn.id,
            property_id=prop.id,
            period_start=txn.period_start,
            period_end=txn.period_end,
            amount=txn.amount,
        )
        return txn

    # ------------------------------------------------------------------
    # Bills
    # ------------------------------------------------------------------

    def compose_bill(
        self,
        draft: BillDraft,
        properties: Sequence[Property],
        settlement_date: date | None = None,
        status: PaymentStatus | None = None,
    ) -> Transaction:
        """Compose a bill transaction from a (possibly receipt-filled) draft.

        Raises:
            SubmissionRejected: If the draft has no positive amount.
        """
        if draft.amount is None or draft.amount <= 0:
            raise SubmissionRejected("Bill amount is required")

        prop = next((p for p in properties if p.id == draft.property_id), None)
        txn = Transaction(
            id=str(uuid.uuid4()),
            property_id=draft.property_id or "",
            property_name=prop.name if prop is not None else "",
            type=TransactionType.BILL,
            date=draft.date or settlement_date or date.today(),
            amount=draft.amount,
            status=status or PaymentStatus(self._settings.billing.default_status),
            notes=draft.notes,
            utility_type=draft.utility_category,
            file_url=draft.file_url,
        )
        logger.info(
            "bill_transaction_composed",
            transaction_id=txn.id,
            property_id=txn.property_id,
            utility_type=txn.utility_type,
            amount=txn.amount,
        )
        return txn

    async def scan_receipt(
        self,
        image: bytes,
        draft: BillDraft,
        properties: Sequence[Property] = (),
    ) -> BillDraft:
        """Recognize ``image`` and pre-fill a copy of ``draft`` from its text.

        Raises:
            RecognitionError: If no recognizer is configured or the engine fails.
        """
        if self._recognizer is None:
            raise RecognitionError("No text recognizer configured")

        try:
            text = await self._recognizer.recognize(image)
        except Exception as e:
            logger.error("receipt_recognition_failed", error=str(e))
            raise RecognitionError(f"Could not read receipt: {e}") from e

        fields = self._extractor.extract(text, properties)
        return merge_extracted(draft, fields)
