"""
Interfaces Layer - Abstract Protocols.

Protocols:
    - WeightedRecord: Record exposing a numeric weight
    - Accessor: Callable projecting a record to the value a range filter tests

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Filters depend on these abstractions, never on concrete entities
"""

from wisecrowd_data.interfaces.weighted_record import Accessor, WeightedRecord, weight_of

__all__ = [
    "Accessor",
    "WeightedRecord",
    "weight_of",
]
