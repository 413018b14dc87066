"""
Book Library CLI

Command-line driver around the shared book repository. It walks through
attach, update, delete and search, and can list or search the catalog.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from booklibrary.core.interfaces.repositories import IRepository
from booklibrary.core.logging_config import setup_logging
from booklibrary.domain.entities.book import Book
from booklibrary.domain.enums.genre import Genre
from booklibrary.domain.exceptions import RepositoryException
from booklibrary.infrastructure.repositories.memory import get_book_repository, reset_book_repository

logger = logging.getLogger(__name__)

DEMO_QUERY = "George"


def setup_parser() -> argparse.ArgumentParser:
    """Set up the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="booklibrary",
        description="In-memory book library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    subparsers.add_parser("demo", help="Attach, update, delete and search in one walkthrough")
    subparsers.add_parser("list", help="Print every book in insertion order")
    search_parser = subparsers.add_parser("search", help="Print books matching a substring")
    search_parser.add_argument("query", help="Case-sensitive substring to look for")

    return parser


def print_books(books: Iterable[Book], out: TextIO) -> None:
    for book in books:
        out.write(book.render())
        out.write("\n")


def run_demo(books: IRepository[Book], out: TextIO) -> None:
    """Attach a book, update and delete another, then search the catalog."""
    books.attach(
        Book(
            id=7,
            title="The Catcher in the Rye",
            author="J.D. Salinger",
            genre=Genre.FICTION,
            year_published=1951,
        )
    )

    b2 = books.find_by_id(2)
    if b2 is None:
        out.write("Book 2 not found\n")
    else:
        b2.title = "Updated Title"
        books.modernize(b2)

        out.write(f"Book {b2.id} updated successfully\n")
        out.write(b2.render())
        out.write("\n")

        if books.remove(b2):
            out.write(f"Book {b2.id} deleted successfully\n")

    data = books.explore(DEMO_QUERY)
    out.write("\n")
    out.write(f"Total Books: {len(data)}\n")
    out.write("----------------------------------\n")
    print_books(data, out)


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None
        out: Stream results are written to; ``sys.stdout`` when None

    Returns:
        Exit code
    """
    out = out or sys.stdout
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None)
    command = args.command or "demo"

    try:
        with get_book_repository() as books:
            if command == "demo":
                run_demo(books, out)
            elif command == "list":
                print_books(books, out)
            elif command == "search":
                print_books(books.explore(args.query), out)
    except RepositoryException as e:
        logger.error("Command %s failed: %s", command, e)
        out.write(f"Error: {e}\n")
        return 1
    finally:
        reset_book_repository()

    return 0
