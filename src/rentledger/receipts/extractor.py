"""Receipt field extraction facade.

Runs the four independent heuristics (amount, date, property, utility
category) over recognized text. Each one is best-effort: a miss leaves its
field as None and never raises. The extractor keeps no state between calls.
"""

from collections.abc import Sequence

from rentledger.config import ReceiptSettings
from rentledger.logging import get_logger
from rentledger.models import ExtractedFields, Property
from rentledger.receipts.amount import build_amount_pattern, extract_amount
from rentledger.receipts.dates import extract_date
from rentledger.receipts.matching import classify_utility, match_property

logger = get_logger(__name__)


class ReceiptExtractor:
    """Recovers structured bill hints from noisy receipt text.

    Args:
        settings: Date convention, century prefix and currency symbols.
    """

    def __init__(self, settings: ReceiptSettings | None = None) -> None:
        self._settings = settings or ReceiptSettings()
        self._amount_pattern = build_amount_pattern(self._settings.currency_symbols)

    def extract(self, text: str, properties: Sequence[Property] = ()) -> ExtractedFields:
        """Extract amount, date, property and utility category from ``text``.

        Args:
            text: Raw text from the recognition engine.
            properties: Known properties, in the caller's preferred match order.

        Returns:
            ExtractedFields with every unmatched field left as None.
        """
        matched = match_property(text, properties)
        fields = ExtractedFields(
            amount=extract_amount(text, self._amount_pattern),
            date=extract_date(
                text,
                convention=self._settings.date_convention,
                century_prefix=self._settings.century_prefix,
            ),
            property_id=matched.id if matched is not None else None,
            utility_category=classify_utility(text),
        )
        logger.debug(
            "receipt_fields_extracted",
            amount=fields.amount,
            date=fields.date,
            property_id=fields.property_id,
            utility_category=fields.utility_category,
        )
        return fields
