"""
In-Memory Book Repository Module.

This module provides the in-memory implementation of the repository
interface for books. It's useful for demos, tests, and any process
that does not need durable storage.
"""

from collections.abc import Iterable

from booklibrary.domain.entities.book import Book
from booklibrary.infrastructure.repositories.memory.base_repository import InMemoryRepository


class InMemoryBookRepository(InMemoryRepository[Book]):
    """
    In-memory implementation of the book repository.

    Searches match against every field of a book and return results
    ordered by title.
    """

    def _search_values(self, entity: Book) -> Iterable[str]:
        return entity.search_values()

    def _sort_key(self, entity: Book) -> str:
        return entity.title

    def _copy_fields(self, target: Book, source: Book) -> None:
        target.title = source.title
        target.author = source.author
        target.genre = source.genre
        target.year_published = source.year_published
