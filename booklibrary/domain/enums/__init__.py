"""Domain enumerations."""

from booklibrary.domain.enums.genre import Genre

__all__ = ["Genre"]
