"""
Reference Collection - In-Memory Container for Reference Entities.

EntityCollection holds entities in insertion order. ReferenceCollection adds
unique ids, lookups and weight-range queries; range queries delegate to
filter_by_range.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from wisecrowd_data.domain.entities import ReferenceEntity
from wisecrowd_data.filters.range_filter import filter_by_range
from wisecrowd_data.interfaces.weighted_record import weight_of
from wisecrowd_data.validation.errors import DuplicateEntityError, EntityNotFoundError
from wisecrowd_data.validation.range_validator import PERCENTAGE_CEILING

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=ReferenceEntity)


class EntityCollection(Generic[E]):
    """Ordered collection of entities."""

    # Human readable entity name for error messages
    entity_label = "Entity"

    def __init__(self, entities: Optional[Iterable[E]] = None) -> None:
        self._entities: List[E] = []
        if entities is not None:
            self.add_all(entities)

    def add(self, entity: E) -> None:
        self._entities.append(entity)

    def add_all(self, entities: Iterable[E]) -> None:
        for entity in entities:
            self.add(entity)

    def get_all(self) -> List[E]:
        """Return a copy of all entities in insertion order."""
        return list(self._entities)

    def size(self) -> int:
        return len(self._entities)

    def is_empty(self) -> bool:
        return not self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._entities))

    def _find_one(self, predicate: Callable[[E], bool], not_found: str) -> E:
        for entity in self._entities:
            if predicate(entity):
                return entity
        raise EntityNotFoundError(not_found)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._entities)})"


class ReferenceCollection(EntityCollection[E]):
    """Ordered collection of weighted entities keyed by id."""

    def add(self, entity: E) -> None:
        """
        Add an entity.

        Raises:
            DuplicateEntityError: If an entity with the same id exists
        """
        if any(existing.id == entity.id for existing in self._entities):
            raise DuplicateEntityError(
                f"{self.entity_label} with ID {entity.id} already exists",
                entity_id=entity.id,
            )
        super().add(entity)

    def get_by_id(self, entity_id: int) -> E:
        """
        Get an entity by its id.

        Raises:
            EntityNotFoundError: If no entity has this id
        """
        return self._find_one(
            lambda e: e.id == entity_id,
            f"{self.entity_label} with ID {entity_id} not found",
        )

    def filter_by_weight(self, min_weight: float, max_weight: float) -> List[E]:
        """
        Entities whose weight lies in [min_weight, max_weight].

        Raises:
            InvalidRangeError: If the range is malformed
        """
        return filter_by_range(
            self._entities, min_weight, max_weight, weight_of, ceiling=PERCENTAGE_CEILING
        )

    def _find_by_text(self, attribute: str, text: str) -> E:
        """Case-insensitive exact match on a text attribute."""
        wanted = text.casefold()
        return self._find_one(
            lambda e: getattr(e, attribute).casefold() == wanted,
            f"{self.entity_label} with {attribute} '{text}' not found",
        )
