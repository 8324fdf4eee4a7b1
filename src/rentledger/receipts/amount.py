"""Monetary amount extraction from receipt text.

Every currency-shaped substring is collected and the largest one wins: on a
receipt the biggest currency amount is almost always the total rather than
a line item or tax figure.

A currency amount is an optional currency symbol, digits optionally grouped
by ``,`` thousands separators, and a mandatory two-digit decimal part.
Dotted dates such as ``07.03.2024`` are not amounts. A comma directly after
an amount's cents is a field delimiter, so ``45.00,4.50`` holds two amounts;
any other digit-comma prefix belongs to a broken thousands group.

CRITICAL: All amounts use Decimal. Never use float.
"""

import re
from decimal import Decimal

DEFAULT_CURRENCY_SYMBOLS = "$€£"


def build_amount_pattern(currency_symbols: str = DEFAULT_CURRENCY_SYMBOLS) -> re.Pattern[str]:
    """Compile the currency-amount regex for the given symbol set."""
    symbols = "".join(re.escape(s) for s in currency_symbols)
    prefix = rf"(?:[{symbols}]\s?)?" if symbols else ""
    return re.compile(
        rf"(?<![\d.])(?:(?<!\d,)|(?<=\.\d\d,)){prefix}(\d{{1,3}}(?:,\d{{3}})+|\d+)\.(\d{{2}})(?!\.?\d)"
    )


_DEFAULT_PATTERN = build_amount_pattern()


def find_amounts(text: str, pattern: re.Pattern[str] = _DEFAULT_PATTERN) -> list[Decimal]:
    """Return every currency amount in ``text``, in order of appearance."""
    amounts = []
    for match in pattern.finditer(text):
        whole, cents = match.groups()
        amounts.append(Decimal(f"{whole.replace(',', '')}.{cents}"))
    return amounts


def extract_amount(text: str, pattern: re.Pattern[str] = _DEFAULT_PATTERN) -> Decimal | None:
    """Return the largest positive currency amount in ``text``.

    Args:
        text: Raw recognized receipt text.
        pattern: Compiled amount regex (see ``build_amount_pattern``).

    Returns:
        The maximum amount found, or None when there is no positive amount.
    """
    amounts = find_amounts(text, pattern)
    if not amounts:
        return None
    best = max(amounts)
    return best if best > 0 else None
