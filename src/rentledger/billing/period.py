"""Settlement period resolution for rent transactions.

A period starts the day after the previous settlement ended (contiguous, no
gap and no double-billed day). Without a usable previous settlement the
manually chosen start is used. Periods are whole weeks with inclusive
boundaries, so the end is ``start + weeks * 7 - 1`` days.

Invalid dates never raise here: the unparsed manual start is carried on the
returned period for the caller's validation step to reject.
"""

from datetime import date, datetime, timedelta

from rentledger.billing.rate_history import RateFallback, resolve_rate
from rentledger.exceptions import InvalidDurationError
from rentledger.logging import get_logger
from rentledger.models import Property, SettlementPeriod, Transaction

logger = get_logger(__name__)

MIN_DURATION_WEEKS = 1
MAX_DURATION_WEEKS = 5


def parse_iso_date(value: str | date | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` value, returning None when it is not a valid date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def period_end_for(start: date, weeks: int) -> date:
    """Inclusive last day of a ``weeks``-long period starting on ``start``."""
    return start + timedelta(days=weeks * 7 - 1)


def next_period_start(prior: Transaction | None) -> date | None:
    """Day after the prior settlement's ``period_end``, or None if unusable."""
    if prior is None:
        return None
    prior_end = parse_iso_date(prior.period_end)
    if prior_end is None:
        return None
    return prior_end + timedelta(days=1)


class PeriodResolver:
    """Computes the next settlement period and the rate that applies to it.

    Pure: identical inputs always yield an identical SettlementPeriod.

    Args:
        rate_fallback: Rate policy when every history entry post-dates the start.
    """

    def __init__(self, rate_fallback: RateFallback = "current_rate") -> None:
        self._rate_fallback = rate_fallback

    def resolve(
        self,
        prop: Property,
        prior: Transaction | None,
        manual_start: str | date | None,
        weeks: int,
    ) -> SettlementPeriod:
        """Resolve the period following ``prior`` (or starting at ``manual_start``).

        Args:
            prop: Property whose rent history supplies the rate.
            prior: Most recent rent transaction for the property, if any.
            manual_start: User-chosen start, used only without a usable ``prior``.
            weeks: Period length in whole weeks (1-5).

        Returns:
            SettlementPeriod; incomplete (``start is None``) when the manual
            start could not be parsed.

        Raises:
            InvalidDurationError: If ``weeks`` is outside 1-5.
        """
        if not MIN_DURATION_WEEKS <= weeks <= MAX_DURATION_WEEKS:
            raise InvalidDurationError(
                f"Duration must be {MIN_DURATION_WEEKS}-{MAX_DURATION_WEEKS} weeks, got {weeks}"
            )

        start = next_period_start(prior)
        from_prior = start is not None
        if start is None:
            start = parse_iso_date(manual_start)

        if start is None:
            raw = "" if manual_start is None else str(manual_start)
            logger.debug("rent_period_unresolved", property_id=prop.id, raw_start=raw)
            return SettlementPeriod(
                start=None,
                end=None,
                weeks=weeks,
                rate=resolve_rate(prop, None, self._rate_fallback),
                raw_start=raw,
            )

        period = SettlementPeriod(
            start=start,
            end=period_end_for(start, weeks),
            weeks=weeks,
            rate=resolve_rate(prop, start, self._rate_fallback),
        )
        logger.debug(
            "rent_period_resolved",
            property_id=prop.id,
            start=period.period_start,
            end=period.period_end,
            rate=period.rate,
            from_prior=from_prior,
        )
        return period
