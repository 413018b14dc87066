"""
Exception classes for the application domain.

This module exports common exceptions used throughout the application.
"""

from booklibrary.domain.exceptions.base import DomainException
from booklibrary.domain.exceptions.repository import (
    DuplicateIdError,
    InvalidEntityError,
    NotFoundError,
    RepositoryException,
)

__all__ = [
    "DomainException",
    "DuplicateIdError",
    "InvalidEntityError",
    "NotFoundError",
    "RepositoryException",
]
