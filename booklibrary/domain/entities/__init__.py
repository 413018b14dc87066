"""Domain entities."""

from booklibrary.domain.entities.book import Book

__all__ = ["Book"]
