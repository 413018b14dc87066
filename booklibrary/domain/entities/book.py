"""
Book domain entity.

This module defines the catalog record managed by the book repository.
The ``id`` is fixed at construction; every other field may be edited.
"""

from pydantic import BaseModel, ConfigDict, Field

from booklibrary.domain.enums.genre import Genre

RENDER_SEPARATOR = "************************"


class Book(BaseModel):
    """
    Domain entity representing a book in the catalog.

    Two books are equal when all of their fields are equal. Repositories use
    the ``id`` alone for identity and equality only for removal.
    """

    id: int = Field(frozen=True)
    title: str = ""
    author: str = ""
    genre: Genre = Genre.FICTION
    year_published: int = 0

    model_config = ConfigDict(validate_assignment=True)

    def is_valid(self) -> bool:
        """Check that title and author are filled in and the year is positive."""
        return bool(self.title.strip()) and bool(self.author.strip()) and self.year_published > 0

    def search_values(self) -> tuple[str, ...]:
        """Return the string form of every field, id first."""
        return (
            str(self.id),
            self.title,
            self.author,
            str(self.genre),
            str(self.year_published),
        )

    def render(self) -> str:
        """
        Render the book as a multi-line block for display.

        Returns:
            str: Human readable description ending with a separator line
        """
        return (
            "Book Info\n"
            f"Book ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"Genre: {self.genre}\n"
            f"Year Published: {self.year_published}\n"
            f"{RENDER_SEPARATOR}\n"
        )

    def __str__(self) -> str:
        return self.render()
