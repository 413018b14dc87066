"""
Base repository interface definition.

This module defines the foundational repository interface
following the Repository Pattern from Domain-Driven Design.
Concrete stores (in-memory today, persisted later) implement it.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from booklibrary.core.interfaces.entity import IValidatableEntity

# Generic type variable for domain entities
T = TypeVar("T", bound=IValidatableEntity)


class IRepository(Generic[T], ABC):
    """
    Base interface for all repository implementations.

    Repositories own their entities, keep them in insertion order and
    guarantee that no two resident entities share an id. A repository is
    also a context manager: leaving the ``with`` block disposes it.
    """

    @abstractmethod
    def attach(self, entity: T) -> None:
        """
        Insert a new entity at the end of the collection.

        Args:
            entity: The entity to insert

        Raises:
            DuplicateIdError: If an entity with the same id is already resident
            InvalidEntityError: If the entity fails ``is_valid()``
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, entity: T) -> bool:
        """
        Remove the first resident entity equal to ``entity`` by value.

        Args:
            entity: The value to match against (all fields, not just the id)

        Returns:
            True if an entity was removed, False if nothing matched
        """
        raise NotImplementedError

    @abstractmethod
    def modernize(self, entity: T) -> None:
        """
        Overwrite the mutable fields of the resident entity sharing ``entity.id``.

        Args:
            entity: The entity carrying the new field values

        Raises:
            NotFoundError: If no resident entity has that id
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, entity_id: Any) -> T | None:
        """
        Retrieve an entity by its unique ID.

        Args:
            entity_id: The unique identifier of the entity

        Returns:
            The entity if found, None otherwise
        """
        raise NotImplementedError

    @abstractmethod
    def explore(self, query: str) -> list[T]:
        """
        Search every field of every entity for a case-sensitive substring.

        Args:
            query: The substring to look for

        Returns:
            Matching entities sorted by title ascending
        """
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate lazily over the resident entities in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def dispose(self) -> None:
        """Release every resident entity. Safe to call more than once."""
        raise NotImplementedError

    def __enter__(self) -> "IRepository[T]":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()
