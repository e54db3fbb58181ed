"""
Filters Package - Range Filtering.

Filters:
    - filter_by_range: Pure, generic inclusive range filter
    - RangeFilter: Configured filter stage with a fixed accessor
    - RangeFilterResult: Matched and rejected records of a RangeFilter run
    - range_predicate: Validated single-record membership test shared by both

Design Principles:
    - Generic over the record type (accessor-driven)
    - Range validated before scanning, never clamped
    - Stable: output keeps input order
"""

from wisecrowd_data.filters.range_filter import (
    RangeFilter,
    RangeFilterResult,
    filter_by_range,
    range_predicate,
)

__all__ = [
    "RangeFilter",
    "RangeFilterResult",
    "filter_by_range",
    "range_predicate",
]
