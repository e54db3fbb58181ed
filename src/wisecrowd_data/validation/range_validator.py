"""
Range Validator - Validate Filter Ranges Before Scanning.

Validates an inclusive [lower_bound, upper_bound] window:
    - Both bounds are real numbers (not bool, not NaN)
    - lower_bound >= 0
    - upper_bound <= ceiling (when a ceiling is given)
    - lower_bound <= upper_bound

Design Notes:
    - Fail-fast principle
    - Never clamps; an invalid range is always an error
    - The default ceiling is the percentage domain (100)
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional

from wisecrowd_data.validation.errors import InvalidRangeError

MIN_LOWER_BOUND = 0.0
PERCENTAGE_CEILING = 100.0


def validate_range(
    lower_bound: float,
    upper_bound: float,
    ceiling: Optional[float] = PERCENTAGE_CEILING,
) -> None:
    """
    Validate a filter range.

    Args:
        lower_bound: Inclusive lower bound, must be >= 0
        upper_bound: Inclusive upper bound, must be >= lower_bound
        ceiling: Highest allowed upper bound, or None for no ceiling

    Raises:
        InvalidRangeError: If the range is malformed
    """
    _check_number("lower_bound", lower_bound)
    _check_number("upper_bound", upper_bound)

    if lower_bound < MIN_LOWER_BOUND:
        raise InvalidRangeError(
            f"lower_bound must be non-negative, but was: {lower_bound}",
            field="lower_bound",
            value=lower_bound,
        )

    if ceiling is not None and upper_bound > ceiling:
        raise InvalidRangeError(
            f"upper_bound must not exceed {ceiling}, but was: {upper_bound}",
            field="upper_bound",
            value=upper_bound,
        )

    if lower_bound > upper_bound:
        raise InvalidRangeError(
            f"lower_bound ({lower_bound}) must be less than or equal to "
            f"upper_bound ({upper_bound})",
            field="lower_bound",
            value=lower_bound,
        )


def _check_number(field: str, value: Any) -> None:
    """Reject bools, non-reals and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidRangeError(
            f"{field} must be a number, but was: {value!r}",
            field=field,
            value=value,
        )
    if math.isnan(value):
        raise InvalidRangeError(f"{field} must not be NaN", field=field, value=value)
