"""
Factory functions for in-memory repository implementations.

``get_book_repository`` hands out the one repository shared by the whole
process. Code that wants its own store, tests in particular, should call
``create_book_repository`` instead.
"""

import logging
import threading

from booklibrary.core.config import get_settings
from booklibrary.infrastructure.repositories.memory.book_repository import InMemoryBookRepository
from booklibrary.infrastructure.repositories.memory.seed_data import sample_books

logger = logging.getLogger(__name__)

_instance: InMemoryBookRepository | None = None
_instance_lock = threading.Lock()


def create_book_repository(
    seed: bool = True, search_max_workers: int | None = None
) -> InMemoryBookRepository:
    """
    Factory function for creating InMemoryBookRepository instances.

    Args:
        seed: Whether to load the sample catalog
        search_max_workers: Scan workers for searches; defaults to ``SEARCH_MAX_WORKERS``

    Returns:
        A new InMemoryBookRepository instance
    """
    if search_max_workers is None:
        search_max_workers = get_settings().SEARCH_MAX_WORKERS
    entities = sample_books() if seed else None
    return InMemoryBookRepository(entities, search_max_workers=search_max_workers)


def get_book_repository() -> InMemoryBookRepository:
    """
    Return the process-wide book repository, creating it on first access.

    Returns:
        The shared InMemoryBookRepository instance
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = create_book_repository(seed=get_settings().SEED_SAMPLE_DATA)
                logger.info("Created shared book repository with %d books", len(_instance))
    return _instance


def reset_book_repository() -> None:
    """Dispose the shared repository and forget it; the next access builds a new one."""
    global _instance
    with _instance_lock:
        if _instance is not None:
            _instance.dispose()
        _instance = None
