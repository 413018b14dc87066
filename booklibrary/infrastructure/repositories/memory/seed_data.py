"""
Sample catalog used to seed the shared book repository.
"""

from booklibrary.domain.entities.book import Book
from booklibrary.domain.enums.genre import Genre

SAMPLE_BOOKS: tuple[dict, ...] = (
    {"id": 1, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "genre": Genre.FICTION, "year_published": 1925},
    {"id": 2, "title": "To Kill a Mockingbird", "author": "Harper Lee", "genre": Genre.FICTION, "year_published": 1960},
    {"id": 3, "title": "1984", "author": "George Orwell", "genre": Genre.SCI_FI, "year_published": 1949},
    {"id": 4, "title": "Pride and Prejudice", "author": "Jane Austen", "genre": Genre.ROMANCE, "year_published": 1813},
    {"id": 5, "title": "The Hobbit", "author": "J.R.R. Tolkien", "genre": Genre.FANTASY, "year_published": 1937},
    {"id": 6, "title": "Steve Jobs", "author": "Walter Isaacson", "genre": Genre.BIOGRAPHY, "year_published": 2011},
)


def sample_books() -> list[Book]:
    """Build fresh Book instances for the sample catalog."""
    return [Book(**data) for data in SAMPLE_BOOKS]
