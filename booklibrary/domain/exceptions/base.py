"""
Base exception for the book catalog.

Every error raised by the catalog derives from ``DomainException`` and
remembers which book it concerns, when there is one.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for catalog errors, optionally tied to a book id."""

    def __init__(self, message: str = "Book catalog error", entity_id: Any = None):
        self.message = message
        self.entity_id = entity_id
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
