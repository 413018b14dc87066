"""Interfaces shared across layers."""

from booklibrary.core.interfaces.entity import IValidatableEntity
from booklibrary.core.interfaces.repositories import IRepository

__all__ = ["IRepository", "IValidatableEntity"]
