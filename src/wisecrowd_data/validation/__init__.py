"""
Validation Package - Error Types and Range Validation.

This package provides:
    - EntityValidationError: Entity construction failures
    - InvalidRangeError: Malformed filter ranges
    - EntityNotFoundError / DuplicateEntityError: Collection lookups
    - validate_range: Range checks run before any filtering

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages naming the field and value
"""

from wisecrowd_data.validation.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
    InvalidRangeError,
)
from wisecrowd_data.validation.range_validator import (
    MIN_LOWER_BOUND,
    PERCENTAGE_CEILING,
    validate_range,
)

__all__ = [
    "DuplicateEntityError",
    "EntityNotFoundError",
    "EntityValidationError",
    "InvalidRangeError",
    "MIN_LOWER_BOUND",
    "PERCENTAGE_CEILING",
    "validate_range",
]
