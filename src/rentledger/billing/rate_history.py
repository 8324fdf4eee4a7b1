"""Historical rent-rate resolution.

Finds the rate in effect on a given day from a property's effective-dated
rate log. The log is kept sorted on write (see ``RateHistory``), so the lookup
is a single ascending pass that keeps overwriting the tracked entry while
entries are dated on or before the target day.

CRITICAL: All rates use Decimal. Never use float.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Literal

from rentledger.logging import get_logger
from rentledger.models import Property, RateChangeEntry

logger = get_logger(__name__)

RateFallback = Literal["current_rate", "earliest_entry"]


def find_effective_entry(
    entries: Iterable[RateChangeEntry],
    on: date,
) -> RateChangeEntry | None:
    """Return the latest entry whose effective date is on or before ``on``.

    Same-day entries count as effective. ``entries`` is sorted ascending
    here, so callers may pass an unordered collection.

    Args:
        entries: Rate-change entries in any order.
        on: The day the rate must apply to.

    Returns:
        The most recent qualifying entry, or None when every entry is dated
        after ``on`` (or there are no entries).
    """
    effective: RateChangeEntry | None = None
    for entry in sorted(entries):
        if entry.effective_date <= on:
            effective = entry
        else:
            break
    return effective


def resolve_rate(
    prop: Property,
    on: date | None,
    fallback: RateFallback = "current_rate",
) -> Decimal:
    """Resolve the weekly rent rate that applies to ``prop`` on ``on``.

    Fallbacks when no history entry qualifies:
      - empty history, or ``on`` unknown: the property's ``current_rate``
      - ``fallback="current_rate"``: the property's ``current_rate``
      - ``fallback="earliest_entry"``: the earliest history entry's amount

    Args:
        prop: Property carrying ``rent_history`` and ``current_rate``.
        on: Period start day, or None when it could not be determined.
        fallback: Policy for histories that start after ``on``.

    Returns:
        The applicable rate as a Decimal.
    """
    if on is None or len(prop.rent_history) == 0:
        return prop.current_rate

    entry = find_effective_entry(prop.rent_history, on)
    if entry is not None:
        return entry.amount

    earliest = prop.rent_history.earliest
    if fallback == "earliest_entry" and earliest is not None:
        logger.debug(
            "rate_fallback_earliest_entry",
            property_id=prop.id,
            on=on,
            rate=earliest.amount,
        )
        return earliest.amount

    logger.debug(
        "rate_fallback_current_rate",
        property_id=prop.id,
        on=on,
        rate=prop.current_rate,
    )
    return prop.current_rate
