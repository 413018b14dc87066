"""
In-Memory Repository Base Module.

This module provides a generic in-memory implementation of the repository
interface. Entities are kept in a list in insertion order; subclasses say how
an entity is searched, sorted and overwritten.
"""

import logging
import threading
from abc import abstractmethod
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from booklibrary.core.interfaces.repositories.base_repository import IRepository, T
from booklibrary.domain.exceptions import DuplicateIdError, InvalidEntityError, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryRepository(IRepository[T]):
    """
    Generic in-memory implementation of the repository interface.

    Every access to the collection goes through one re-entrant lock. The
    store itself is meant for single-threaded use; the lock only keeps the
    list consistent when a caller does share it between threads.
    """

    def __init__(self, entities: Iterable[T] | None = None, search_max_workers: int = 1):
        """
        Initialize the repository.

        Args:
            entities: Optional initial entities, attached in order
            search_max_workers: Worker threads used to scan during ``explore``

        Raises:
            ValueError: If ``search_max_workers`` is lower than 1
        """
        if search_max_workers < 1:
            raise ValueError("search_max_workers must be at least 1")
        self._items: list[T] = []
        self._lock = threading.RLock()
        self._search_max_workers = search_max_workers
        for entity in entities or ():
            self.attach(entity)

    # Hooks

    @abstractmethod
    def _search_values(self, entity: T) -> Iterable[str]:
        """Return the string form of every field of ``entity``."""
        raise NotImplementedError

    @abstractmethod
    def _sort_key(self, entity: T) -> Any:
        """Return the key search results are ordered by."""
        raise NotImplementedError

    @abstractmethod
    def _copy_fields(self, target: T, source: T) -> None:
        """Overwrite every mutable field of ``target`` with those of ``source``."""
        raise NotImplementedError

    # Repository operations

    def attach(self, entity: T) -> None:
        with self._lock:
            if any(item.id == entity.id for item in self._items):
                logger.warning("Rejected entity %s: duplicate id", entity.id)
                raise DuplicateIdError(entity.id)
            if not entity.is_valid():
                logger.warning("Rejected entity %s: failed validation", entity.id)
                raise InvalidEntityError(entity.id)
            self._items.append(entity)
        logger.info("Attached entity %s", entity.id)

    def remove(self, entity: T) -> bool:
        with self._lock:
            try:
                self._items.remove(entity)
            except ValueError:
                logger.debug("No resident entity equal to %s", entity.id)
                return False
        logger.info("Removed entity %s", entity.id)
        return True

    def modernize(self, entity: T) -> None:
        with self._lock:
            existing = self._find(entity.id)
            if existing is None:
                logger.warning("Cannot update entity %s: not found", entity.id)
                raise NotFoundError(entity.id)
            self._copy_fields(existing, entity)
        logger.info("Updated entity %s", entity.id)

    def find_by_id(self, entity_id: Any) -> T | None:
        with self._lock:
            entity = self._find(entity_id)
        logger.debug("Lookup of %s %s", entity_id, "hit" if entity is not None else "missed")
        return entity

    def explore(self, query: str) -> list[T]:
        with self._lock:
            candidates = list(self._items)

        if self._search_max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self._search_max_workers) as executor:
                flags = list(executor.map(lambda entity: self._matches(entity, query), candidates))
            matches = [entity for entity, flag in zip(candidates, flags) if flag]
        else:
            matches = [entity for entity in candidates if self._matches(entity, query)]

        # Stable sort: ties keep insertion order whatever the scan strategy.
        results = sorted(matches, key=self._sort_key)
        logger.debug("Search for %r matched %d of %d entities", query, len(results), len(candidates))
        return results

    def __iter__(self) -> Iterator[T]:
        # Live view: each step reads the current list, so entities attached
        # during iteration are still reached.
        index = 0
        while True:
            with self._lock:
                if index >= len(self._items):
                    return
                entity = self._items[index]
            yield entity
            index += 1

    def dispose(self) -> None:
        with self._lock:
            count = len(self._items)
            self._items.clear()
        if count:
            logger.info("Disposed repository holding %d entities", count)

    # Collection helpers

    @property
    def data(self) -> tuple[T, ...]:
        """Snapshot of the resident entities in insertion order."""
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __getitem__(self, index: int) -> T:
        with self._lock:
            return self._items[index]

    def __contains__(self, entity: object) -> bool:
        with self._lock:
            return entity in self._items

    def _find(self, entity_id: Any) -> T | None:
        return next((item for item in self._items if item.id == entity_id), None)

    def _matches(self, entity: T, query: str) -> bool:
        return any(query in value for value in self._search_values(entity))
