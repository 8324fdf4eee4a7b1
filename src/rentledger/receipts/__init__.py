"""Receipt text extraction.

Heuristics that pre-fill a bill from OCR text: the largest currency amount,
the first plausible date, the first property named, and a keyword-based
utility category. Also defines the TextRecognizer interface the OCR engine
is injected through.
"""

from rentledger.receipts.amount import build_amount_pattern, extract_amount, find_amounts
from rentledger.receipts.dates import extract_date, interpret_date_parts
from rentledger.receipts.extractor import ReceiptExtractor
from rentledger.receipts.matching import UTILITY_KEYWORDS, classify_utility, match_property
from rentledger.receipts.recognizer import TextRecognizer

__all__ = [
    "ReceiptExtractor",
    "TextRecognizer",
    "UTILITY_KEYWORDS",
    "build_amount_pattern",
    "classify_utility",
    "extract_amount",
    "extract_date",
    "find_amounts",
    "interpret_date_parts",
    "match_property",
]
