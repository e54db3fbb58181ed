"""
Validation Errors - Exception Types Raised on Invalid Input.

Two independent error kinds are raised fail-fast at the point of invalid
input:
    - EntityValidationError: an entity's invariants do not hold at construction
    - InvalidRangeError: the range passed to a range filter is malformed

Collection lookups add:
    - EntityNotFoundError: no entity with the requested key
    - DuplicateEntityError: an entity id is already present

All of them subclass builtin exceptions (ValueError / LookupError) so callers
that only care about "bad input" can catch the builtin type.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError


class EntityValidationError(ValueError):
    """Raised when an entity cannot be constructed from the given values."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.errors = errors or []

    @classmethod
    def from_pydantic(
        cls,
        entity_name: str,
        exc: PydanticValidationError,
    ) -> "EntityValidationError":
        """
        Build from a pydantic ValidationError.

        The first failing field becomes ``field``/``value``; every failure is
        kept in ``errors`` as ``{"field", "message", "value"}`` dicts.
        """
        errors: List[Dict[str, Any]] = []
        for detail in exc.errors():
            field = ".".join(str(part) for part in detail["loc"]) or "__root__"
            value = None if detail["type"] == "missing" else detail.get("input")
            errors.append({"field": field, "message": detail["msg"], "value": value})

        first = errors[0]
        message = (
            f"{entity_name}.{first['field']} is invalid: {first['message']}, "
            f"but was: {first['value']!r}"
        )
        if len(errors) > 1:
            message += f" (and {len(errors) - 1} more)"
        return cls(message, field=first["field"], value=first["value"], errors=errors)


class InvalidRangeError(ValueError):
    """Raised when a filter range is malformed."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class EntityNotFoundError(LookupError):
    """Raised when a collection has no entity matching a lookup."""


class DuplicateEntityError(ValueError):
    """Raised when adding an entity whose id is already in the collection."""

    def __init__(self, message: str, entity_id: int) -> None:
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id
