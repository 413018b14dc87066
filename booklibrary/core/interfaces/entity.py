"""
Entity protocol.

Structural contract every entity managed by a repository must satisfy:
a unique identifier and a self-validation predicate.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IValidatableEntity(Protocol):
    """An identifiable entity that can tell whether it is fit for storage."""

    @property
    def id(self) -> Any:
        """Unique, immutable identifier of the entity."""
        ...

    def is_valid(self) -> bool:
        """Return True if the entity carries complete, well-formed data."""
        ...
