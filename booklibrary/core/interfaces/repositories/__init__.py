"""
Repository interfaces for the domain layer.

This module defines the abstract repository interfaces following
the repository pattern from Domain-Driven Design. These interfaces
define contracts for data access without exposing implementation details.
"""

from booklibrary.core.interfaces.repositories.base_repository import IRepository

__all__ = ["IRepository"]
