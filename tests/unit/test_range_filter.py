"""
Unit Tests for filter_by_range and RangeFilter.

Test Aspects Covered:
    ✅ Business Logic: Inclusive bounds, order preservation, idempotence
    ✅ Edge Cases: Empty input, single-point range, generators, no epsilon
    ✅ Error Handling: Range rejected before any item is read
"""

from __future__ import annotations

from typing import Iterator, List

import pytest

from wisecrowd_data.filters.range_filter import RangeFilter, filter_by_range, range_predicate
from wisecrowd_data.validation.errors import InvalidRangeError
from tests.fixtures import WeightedItem


def by_percentage(item: WeightedItem) -> float:
    return item.distribution_percentage


class TestFilterByRange:
    """Test cases for filter_by_range."""

    def test_returns_items_within_range(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: Items at 10, 25, 50 filtered to [20, 30]
        EXPECTED: Only the 25 item
        """
        # Act
        result = filter_by_range(weighted_items, 20.0, 30.0, by_percentage)

        # Assert
        assert result == [WeightedItem("Medium", 25.0)]

    def test_negative_lower_bound_raises(self) -> None:
        """
        SCENARIO: Lower bound of -1
        EXPECTED: InvalidRangeError
        """
        items = [WeightedItem("Test", 50.0)]

        with pytest.raises(InvalidRangeError) as exc_info:
            filter_by_range(items, -1.0, 50.0, by_percentage)

        assert exc_info.value.field == "lower_bound"

    def test_empty_input_returns_empty(self) -> None:
        """
        SCENARIO: No items, full range
        EXPECTED: Empty list, no error
        """
        assert filter_by_range([], 0.0, 100.0, by_percentage) == []

    def test_bounds_are_inclusive(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: Bounds equal to item values
        EXPECTED: Both boundary items included
        """
        result = filter_by_range(weighted_items, 10.0, 25.0, by_percentage)

        assert [item.name for item in result] == ["Low", "Medium"]

    def test_single_point_range(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: lower_bound == upper_bound
        EXPECTED: Items with exactly that value
        """
        result = filter_by_range(weighted_items, 50.0, 50.0, by_percentage)

        assert [item.name for item in result] == ["High"]

    def test_exact_comparison_without_epsilon(self) -> None:
        """
        SCENARIO: Value a rounding error above the upper bound
        EXPECTED: Excluded
        """
        items = [WeightedItem("Sum", 0.1 + 0.2)]

        assert filter_by_range(items, 0.0, 0.3, by_percentage) == []

    def test_preserves_input_order(self) -> None:
        """
        SCENARIO: Unsorted input with interleaved matches
        EXPECTED: Matches returned in input order (subsequence)
        """
        items = [
            WeightedItem("a", 40.0),
            WeightedItem("b", 5.0),
            WeightedItem("c", 30.0),
            WeightedItem("d", 90.0),
            WeightedItem("e", 35.0),
        ]

        result = filter_by_range(items, 30.0, 40.0, by_percentage)

        assert [item.name for item in result] == ["a", "c", "e"]

    def test_keeps_duplicates(self) -> None:
        items = [WeightedItem("x", 20.0), WeightedItem("x", 20.0)]

        assert len(filter_by_range(items, 0.0, 100.0, by_percentage)) == 2

    def test_is_idempotent(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: Filtering a filtered result with the same range
        EXPECTED: Same result
        """
        once = filter_by_range(weighted_items, 10.0, 25.0, by_percentage)
        twice = filter_by_range(once, 10.0, 25.0, by_percentage)

        assert twice == once

    def test_returns_new_list_and_leaves_input_alone(
        self, weighted_items: List[WeightedItem]
    ) -> None:
        """
        SCENARIO: Range matching every item
        EXPECTED: Equal but distinct list, same item objects, input unchanged
        """
        original = list(weighted_items)

        result = filter_by_range(weighted_items, 0.0, 100.0, by_percentage)

        assert result == weighted_items
        assert result is not weighted_items
        assert all(a is b for a, b in zip(result, weighted_items))
        assert weighted_items == original

    def test_accepts_any_iterable(self) -> None:
        def generate() -> Iterator[WeightedItem]:
            yield WeightedItem("g1", 1.0)
            yield WeightedItem("g2", 99.0)

        result = filter_by_range(generate(), 50.0, 100.0, by_percentage)

        assert [item.name for item in result] == ["g2"]

    def test_generic_over_record_type(self) -> None:
        """
        SCENARIO: Plain tuples with an index accessor
        EXPECTED: Works without any entity type involved
        """
        rows = [("Low", 10), ("Medium", 25), ("High", 50)]

        result = filter_by_range(rows, 20, 60, lambda row: row[1])

        assert result == [("Medium", 25), ("High", 50)]

    def test_validation_happens_before_scanning(self) -> None:
        """
        SCENARIO: Invalid range with an accessor that must not run
        EXPECTED: InvalidRangeError, accessor never called
        """
        calls: List[WeightedItem] = []

        def recording_accessor(item: WeightedItem) -> float:
            calls.append(item)
            return item.distribution_percentage

        with pytest.raises(InvalidRangeError):
            filter_by_range([WeightedItem("x", 1.0)], -5.0, 10.0, recording_accessor)

        assert calls == []

    def test_inverted_range_rejected(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: lower_bound > upper_bound
        EXPECTED: InvalidRangeError rather than a silent empty result
        NOTE: Stricter than a negative-bound-only check; chosen deliberately
        """
        with pytest.raises(InvalidRangeError):
            filter_by_range(weighted_items, 30.0, 20.0, by_percentage)

    def test_upper_bound_above_ceiling_rejected(
        self, weighted_items: List[WeightedItem]
    ) -> None:
        """
        SCENARIO: upper_bound above the percentage ceiling
        EXPECTED: InvalidRangeError, never clamped
        NOTE: Stricter than a negative-bound-only check; chosen deliberately
        """
        with pytest.raises(InvalidRangeError) as exc_info:
            filter_by_range(weighted_items, 0.0, 100.5, by_percentage)

        assert exc_info.value.field == "upper_bound"

    def test_ceiling_can_be_disabled(self) -> None:
        """
        SCENARIO: Non-percentage domain with ceiling=None
        EXPECTED: Large upper bounds accepted
        """
        items = [WeightedItem("big", 5_000.0), WeightedItem("small", 3.0)]

        result = filter_by_range(items, 100.0, 10_000.0, by_percentage, ceiling=None)

        assert [item.name for item in result] == ["big"]


class TestRangeFilter:
    """Test cases for the RangeFilter stage."""

    def test_splits_matched_and_rejected(self, weighted_items: List[WeightedItem]) -> None:
        # Arrange
        stage = RangeFilter(by_percentage, name="distribution")

        # Act
        result = stage.apply(weighted_items, 20.0, 60.0)

        # Assert
        assert stage.name == "distribution"
        assert [item.name for item in result.matched] == ["Medium", "High"]
        assert [item.name for item in result.rejected] == ["Low"]
        assert result.input_count == 3
        assert result.reduction_ratio == pytest.approx(1 / 3)

    def test_empty_input_has_zero_reduction(self) -> None:
        result = RangeFilter(by_percentage).apply([], 0.0, 100.0)

        assert result.matched == []
        assert result.reduction_ratio == 0.0

    def test_uses_given_ceiling(self) -> None:
        """
        SCENARIO: Ceiling disabled vs default
        EXPECTED: Default rejects 150, unbounded stage accepts it
        """
        items = [WeightedItem("big", 120.0)]

        with pytest.raises(InvalidRangeError):
            RangeFilter(by_percentage).apply(items, 0.0, 150.0)

        unbounded = RangeFilter(by_percentage, ceiling=None)
        assert unbounded.apply(items, 0.0, 150.0).matched == items

    def test_agrees_with_filter_by_range(self, weighted_items: List[WeightedItem]) -> None:
        stage = RangeFilter(by_percentage)

        assert stage.apply(weighted_items, 10.0, 30.0).matched == filter_by_range(
            weighted_items, 10.0, 30.0, by_percentage
        )

    def test_ceiling_is_keyword_only(self, weighted_items: List[WeightedItem]) -> None:
        """
        SCENARIO: Ceiling passed positionally
        EXPECTED: TypeError from the signature, not a silent ceiling
        """
        with pytest.raises(TypeError):
            filter_by_range(weighted_items, 0.0, 50.0, by_percentage, None)  # type: ignore[misc]

        with pytest.raises(TypeError):
            RangeFilter(by_percentage, None)  # type: ignore[misc]


class TestRangePredicate:
    """Test cases for range_predicate."""

    def test_validates_before_returning(self) -> None:
        with pytest.raises(InvalidRangeError) as exc_info:
            range_predicate(-1.0, 10.0, by_percentage)

        assert exc_info.value.field == "lower_bound"

    @pytest.mark.parametrize(
        "value, expected",
        [(9.99, False), (10.0, True), (25.0, True), (30.0, True), (30.01, False)],
    )
    def test_inclusive_bounds(self, value: float, expected: bool) -> None:
        in_range = range_predicate(10.0, 30.0, by_percentage)

        assert in_range(WeightedItem("x", value)) is expected

