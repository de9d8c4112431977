"""Hypermedia links for book resources."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from src.library_api.core.models.book import BookDto, LinkedCollectionResource
from src.library_api.core.models.link import Link

# Route names shared with the HTTP router
GET_BOOKS_FOR_AUTHOR = "get_books_for_author"
GET_BOOK_FOR_AUTHOR = "get_book_for_author"
CREATE_BOOK_FOR_AUTHOR = "create_book_for_author"
UPDATE_BOOK_FOR_AUTHOR = "update_book_for_author"
PARTIALLY_UPDATE_BOOK_FOR_AUTHOR = "partially_update_book_for_author"
DELETE_BOOK_FOR_AUTHOR = "delete_book_for_author"

# (route name, rel, method) for every single-book link, in emission order
BOOK_LINKS: tuple[tuple[str, str, str], ...] = (
    (GET_BOOK_FOR_AUTHOR, "self", "GET"),
    (DELETE_BOOK_FOR_AUTHOR, "delete_book", "DELETE"),
    (UPDATE_BOOK_FOR_AUTHOR, "update_book", "PUT"),
    (PARTIALLY_UPDATE_BOOK_FOR_AUTHOR, "partially_update_book", "PATCH"),
)


class UrlBuilder(Protocol):
    """Resolve a named route into an absolute URL."""

    def link(self, route_name: str, **params: str) -> str: ...


class LinkBuilder:
    def __init__(self, urls: UrlBuilder):
        self._urls = urls

    def book_location(self, author_id: str, book_id: str) -> str:
        return self._urls.link(GET_BOOK_FOR_AUTHOR, author_id=author_id, book_id=book_id)

    def for_book(self, book: BookDto) -> BookDto:
        """Return a copy of ``book`` carrying exactly the four book links."""
        links = [
            Link(
                href=self._urls.link(route, author_id=book.author_id, book_id=book.id),
                rel=rel,
                method=method,
            )
            for route, rel, method in BOOK_LINKS
        ]
        return book.model_copy(update={"links": links})

    def for_books(self, author_id: str, books: Iterable[BookDto]) -> LinkedCollectionResource:
        """Wrap linked books in a collection with a single self link."""
        return LinkedCollectionResource(
            value=[self.for_book(book) for book in books],
            links=[
                Link(
                    href=self._urls.link(GET_BOOKS_FOR_AUTHOR, author_id=author_id),
                    rel="self",
                    method="GET",
                )
            ],
        )
