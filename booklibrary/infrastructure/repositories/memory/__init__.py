"""
In-Memory Repository Implementations.

This package contains in-memory implementations of repository interfaces,
used for demos, testing, and scenarios where persistent storage is not required.
"""

from booklibrary.infrastructure.repositories.memory.base_repository import InMemoryRepository
from booklibrary.infrastructure.repositories.memory.book_repository import InMemoryBookRepository
from booklibrary.infrastructure.repositories.memory.factories import (
    create_book_repository,
    get_book_repository,
    reset_book_repository,
)

__all__ = [
    "InMemoryBookRepository",
    "InMemoryRepository",
    "create_book_repository",
    "get_book_repository",
    "reset_book_repository",
]
