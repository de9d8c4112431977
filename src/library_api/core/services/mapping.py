"""Projections between wire models and persisted entities."""

from typing import Any

from src.library_api.core.models.author import AuthorDto, AuthorForCreation
from src.library_api.core.models.book import BookDto, BookForManipulation
from src.library_api.entities import Author, Book, BookTable


def book_from_payload(
    payload: BookForManipulation, author_id: str, book_id: str | None = None
) -> Book:
    """Build a new ``Book``; ``book_id`` overrides the generated identifier."""
    fields: dict[str, Any] = payload.model_dump()
    if book_id is not None:
        fields["id"] = book_id
    return Book(author_id=author_id, **fields)


def update_view(book: Book) -> dict[str, Any]:
    """The patchable document for an existing book."""
    return {"title": book.title, "description": book.description}


def apply_payload(payload: BookForManipulation, book: Book) -> Book:
    """Copy the mutable fields of ``payload`` onto ``book``."""
    return book.model_copy(update=payload.model_dump())


def book_to_dto(book: Book) -> BookDto:
    return BookDto.model_validate(book, from_attributes=True)


def book_from_row(row: BookTable) -> Book:
    return Book.model_validate(row, from_attributes=True)


def book_to_row(book: Book) -> BookTable:
    return BookTable(**book.model_dump())


def author_from_payload(payload: AuthorForCreation) -> Author:
    return Author(**payload.model_dump())


def author_to_dto(author: Author) -> AuthorDto:
    return AuthorDto.model_validate(author, from_attributes=True)
