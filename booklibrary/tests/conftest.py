"""
Pytest fixtures shared by the book library tests.

Each test gets its own repository; the process-wide one and the cached
settings are reset around every test.
"""

import pytest

from booklibrary.core.config import get_settings
from booklibrary.domain.entities.book import Book
from booklibrary.domain.enums.genre import Genre
from booklibrary.infrastructure.repositories.memory import (
    InMemoryBookRepository,
    create_book_repository,
    reset_book_repository,
)


@pytest.fixture(autouse=True)
def isolate_process_state():
    """Reset cached settings and the shared repository before and after each test."""
    get_settings.cache_clear()
    reset_book_repository()
    yield
    reset_book_repository()
    get_settings.cache_clear()


@pytest.fixture
def seeded_repository() -> InMemoryBookRepository:
    """Repository holding the six sample books."""
    return create_book_repository(seed=True, search_max_workers=1)


@pytest.fixture
def empty_repository() -> InMemoryBookRepository:
    """Repository with no books."""
    return create_book_repository(seed=False, search_max_workers=1)


@pytest.fixture
def catcher() -> Book:
    """A valid book that is not part of the sample catalog."""
    return Book(
        id=7,
        title="The Catcher in the Rye",
        author="J.D. Salinger",
        genre=Genre.FICTION,
        year_published=1951,
    )
