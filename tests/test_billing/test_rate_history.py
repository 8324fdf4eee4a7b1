"""Tests for effective-dated rent rate resolution.

All test values use Decimal (project convention).
"""

from datetime import date
from decimal import Decimal

from rentledger.billing.rate_history import find_effective_entry, resolve_rate
from rentledger.models import Property, RateChangeEntry, RateHistory


class TestFindEffectiveEntry:
    """Tests for the ascending scan over history entries."""

    def test_unordered_input_is_sorted(self) -> None:
        """Insertion order does not matter."""
        entries = [
            RateChangeEntry(date(2024, 6, 1), Decimal("120")),
            RateChangeEntry(date(2023, 1, 1), Decimal("90")),
            RateChangeEntry(date(2024, 1, 1), Decimal("100")),
        ]
        result = find_effective_entry(entries, date(2024, 3, 1))
        assert result == RateChangeEntry(date(2024, 1, 1), Decimal("100"))

    def test_same_day_is_effective(self) -> None:
        """An entry effective on the lookup day applies."""
        entries = [RateChangeEntry(date(2024, 6, 1), Decimal("120"))]
        assert find_effective_entry(entries, date(2024, 6, 1)) == entries[0]

    def test_none_when_all_entries_later(self) -> None:
        """No entry qualifies before its effective date."""
        entries = [RateChangeEntry(date(2024, 6, 1), Decimal("120"))]
        assert find_effective_entry(entries, date(2024, 5, 31)) is None

    def test_empty(self) -> None:
        """An empty history has no effective entry."""
        assert find_effective_entry([], date(2024, 1, 1)) is None


class TestResolveRate:
    """Tests for resolve_rate including both fallback policies."""

    def test_mid_period_uses_earlier_rate(self, ultimo: Property) -> None:
        """Between changes the earlier rate applies."""
        assert resolve_rate(ultimo, date(2024, 3, 1)) == Decimal("100")

    def test_boundary_day_uses_new_rate(self, ultimo: Property) -> None:
        """The new rate applies from its effective date."""
        assert resolve_rate(ultimo, date(2024, 6, 1)) == Decimal("120")

    def test_after_all_entries_uses_latest(self, ultimo: Property) -> None:
        """After the last change the latest rate applies."""
        assert resolve_rate(ultimo, date(2025, 1, 1)) == Decimal("120")

    def test_before_all_entries_falls_back_to_current_rate(self, ultimo: Property) -> None:
        """Before any change the default policy uses the current rate."""
        assert resolve_rate(ultimo, date(2023, 12, 1)) == Decimal("130")

    def test_before_all_entries_earliest_entry_policy(self, ultimo: Property) -> None:
        """Before any change the earliest_entry policy uses the first entry."""
        rate = resolve_rate(ultimo, date(2023, 12, 1), fallback="earliest_entry")
        assert rate == Decimal("100")

    def test_empty_history_uses_current_rate(self, glebe: Property) -> None:
        """Empty history uses the current rate under either policy."""
        assert resolve_rate(glebe, date(2024, 1, 1)) == Decimal("450")
        assert resolve_rate(glebe, date(2024, 1, 1), fallback="earliest_entry") == Decimal("450")

    def test_unknown_day_uses_current_rate(self, ultimo: Property) -> None:
        """No lookup day means the current rate."""
        assert resolve_rate(ultimo, None) == Decimal("130")

    def test_does_not_mutate_history(self, ultimo: Property) -> None:
        """Lookup leaves the history untouched."""
        before = ultimo.rent_history.entries
        resolve_rate(ultimo, date(2024, 3, 1))
        assert ultimo.rent_history.entries == before

    def test_same_day_two_amounts_takes_larger_sorting(self) -> None:
        """Two changes on one day: the later-sorting entry wins deterministically."""
        prop = Property(
            id="p",
            name="P",
            current_rate=Decimal("1"),
            rent_history=RateHistory(
                [
                    RateChangeEntry(date(2024, 1, 1), Decimal("110")),
                    RateChangeEntry(date(2024, 1, 1), Decimal("100")),
                ]
            ),
        )
        assert resolve_rate(prop, date(2024, 1, 1)) == Decimal("110")
