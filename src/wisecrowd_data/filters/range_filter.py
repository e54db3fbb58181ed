"""
Range Filter Implementation.

Selects the items of a collection whose projected numeric value lies within
an inclusive [lower_bound, upper_bound] window:
    - The range is validated before any item is looked at
    - Comparison is exact (no epsilon)
    - Matching items keep their input order
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from wisecrowd_data.interfaces.weighted_record import Accessor
from wisecrowd_data.validation.range_validator import PERCENTAGE_CEILING, validate_range

logger = logging.getLogger(__name__)

T = TypeVar("T")


def filter_by_range(
    items: Iterable[T],
    lower_bound: float,
    upper_bound: float,
    accessor: Accessor[T],
    *,
    ceiling: Optional[float] = PERCENTAGE_CEILING,
) -> List[T]:
    """
    Return the items whose accessor value lies in [lower_bound, upper_bound].

    Args:
        items: Records to filter; not modified
        lower_bound: Inclusive lower bound, must be >= 0
        upper_bound: Inclusive upper bound, must be >= lower_bound
        accessor: Projects a record to the value being tested
        ceiling: Highest allowed upper bound, or None for no ceiling

    Returns:
        New list of the matching items, in input order

    Raises:
        InvalidRangeError: If the range is malformed
    """
    in_range = range_predicate(lower_bound, upper_bound, accessor, ceiling=ceiling)
    return [item for item in items if in_range(item)]


def range_predicate(
    lower_bound: float,
    upper_bound: float,
    accessor: Accessor[T],
    *,
    ceiling: Optional[float] = PERCENTAGE_CEILING,
) -> Callable[[T], bool]:
    """
    Validate the range and return a membership test for single records.

    Raises:
        InvalidRangeError: If the range is malformed
    """
    validate_range(lower_bound, upper_bound, ceiling)

    def in_range(item: T) -> bool:
        return lower_bound <= accessor(item) <= upper_bound

    return in_range


@dataclass
class RangeFilterResult(Generic[T]):
    """Outcome of applying a RangeFilter."""

    matched: List[T] = field(default_factory=list)
    rejected: List[T] = field(default_factory=list)

    @property
    def input_count(self) -> int:
        return len(self.matched) + len(self.rejected)

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (len(self.matched) / self.input_count)


class RangeFilter(Generic[T]):
    """Named filter stage selecting records by a fixed accessor."""

    def __init__(
        self,
        accessor: Accessor[T],
        *,
        ceiling: Optional[float] = PERCENTAGE_CEILING,
        name: str = "range_filter",
    ) -> None:
        """
        Initialize with accessor and ceiling.

        Args:
            accessor: Projects a record to the value being tested
            ceiling: Highest allowed upper bound, or None for no ceiling
            name: Stage name used in log messages
        """
        self.accessor = accessor
        self.ceiling = ceiling
        self._name = name

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return self._name

    def apply(
        self,
        items: Iterable[T],
        lower_bound: float,
        upper_bound: float,
    ) -> RangeFilterResult[T]:
        """
        Split items into matched and rejected.

        Args:
            items: Records to filter
            lower_bound: Inclusive lower bound
            upper_bound: Inclusive upper bound

        Returns:
            RangeFilterResult, both lists in input order

        Raises:
            InvalidRangeError: If the range is malformed
        """
        in_range = range_predicate(
            lower_bound, upper_bound, self.accessor, ceiling=self.ceiling
        )

        result: RangeFilterResult[T] = RangeFilterResult()
        for item in items:
            if in_range(item):
                result.matched.append(item)
            else:
                result.rejected.append(item)

        logger.debug(
            f"{self.name}: [{lower_bound}, {upper_bound}] kept "
            f"{len(result.matched)}/{result.input_count}"
        )
        return result
