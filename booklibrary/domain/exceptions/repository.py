"""
Repository exceptions module.

This module defines exceptions related to repository operations. Each one
carries the id of the entity that caused it so callers can react to it.
"""

from typing import Any

from booklibrary.domain.exceptions.base import DomainException


class RepositoryException(DomainException):
    """Base exception for repository-related errors."""

    def __init__(self, message: str = "Repository operation failed", entity_id: Any = None):
        super().__init__(message, entity_id=entity_id)


class DuplicateIdError(RepositoryException):
    """Raised when attaching an entity whose id is already resident."""

    def __init__(self, entity_id: Any = None, message: str | None = None):
        if message is None:
            message = f"Duplicate book ID {entity_id}, try another"
        super().__init__(message, entity_id=entity_id)


class InvalidEntityError(RepositoryException):
    """Raised when attaching an entity that fails its own validation."""

    def __init__(self, entity_id: Any = None, message: str | None = None):
        if message is None:
            message = f"Book {entity_id} is invalid"
        super().__init__(message, entity_id=entity_id)


class NotFoundError(RepositoryException):
    """Raised when updating an entity that is not resident."""

    def __init__(self, entity_id: Any = None, message: str | None = None):
        if message is None:
            message = f"Book {entity_id} not found"
        super().__init__(message, entity_id=entity_id)
