"""
Book Library.

In-memory repository over a catalog of books.
"""

__version__ = "0.1.0"
