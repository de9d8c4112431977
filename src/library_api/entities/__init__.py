"""Persisted entities, one package per business concept.

Each entity package contains:
- entity.py: Domain model
- table.py: Database persistence model
"""

from .author import Author, AuthorTable
from .book import Book, BookTable

__all__ = [
    "Author",
    "AuthorTable",
    "Book",
    "BookTable",
]
