"""
Genre Enum.

Defines the catalog genres a book can be filed under.
"""

from enum import Enum


class Genre(str, Enum):
    """Genres used in the catalog."""

    FICTION = "Fiction"
    NON_FICTION = "NonFiction"
    MYSTERY = "Mystery"
    SCI_FI = "SciFi"
    ROMANCE = "Romance"
    FANTASY = "Fantasy"
    BIOGRAPHY = "Biography"
    SELF_HELP = "SelfHelp"
    HISTORY = "History"
    POETRY = "Poetry"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

