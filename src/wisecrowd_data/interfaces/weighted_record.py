"""
Weighted Record Protocol.

Defines the accessor contract the range filter depends on. The filter is
generic over any record type: callers pass an accessor projecting a record to
the number being tested. Records that carry their own percentage expose it as
a ``weight`` property and can use ``weight_of`` as the accessor.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - The filter never imports a concrete entity type
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

# Projects a record to the numeric value tested against a range
Accessor = Callable[[T], float]


@runtime_checkable
class WeightedRecord(Protocol):
    """A record exposing a numeric weight, e.g. a distribution percentage."""

    @property
    def weight(self) -> float:
        """Weight used for range filtering."""
        ...


def weight_of(record: WeightedRecord) -> float:
    """Accessor for records implementing WeightedRecord."""
    return record.weight
