"""Data-access layer for authors and their books."""

from typing import Protocol

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.library_api.core.services.mapping import book_from_row, book_to_row
from src.library_api.entities import Author, AuthorTable, Book, BookTable


class LibraryRepository(Protocol):
    """Storage capability consumed by the book resource operations.

    Mutations are staged; nothing is visible to other units of work until
    ``save`` returns ``True``.
    """

    def author_exists(self, author_id: str) -> bool: ...

    def get_books_for_author(self, author_id: str) -> list[Book]: ...

    def get_book_for_author(self, author_id: str, book_id: str) -> Book | None: ...

    def add_book_for_author(self, author_id: str, book: Book) -> None: ...

    def update_book_for_author(self, book: Book) -> None: ...

    def delete_book(self, book: Book) -> None: ...

    def save(self) -> bool: ...


class SqlLibraryRepository:
    """``LibraryRepository`` backed by a SQLModel session (one per request)."""

    def __init__(self, session: Session) -> None:
        self._session = session

    # Authors

    def author_exists(self, author_id: str) -> bool:
        return self._session.get(AuthorTable, author_id) is not None

    def get_authors(self) -> list[Author]:
        statement = select(AuthorTable).order_by(AuthorTable.last_name, AuthorTable.first_name)
        rows = self._session.exec(statement).all()
        return [Author.model_validate(row, from_attributes=True) for row in rows]

    def get_author(self, author_id: str) -> Author | None:
        row = self._session.get(AuthorTable, author_id)
        if row is None:
            return None
        return Author.model_validate(row, from_attributes=True)

    def add_author(self, author: Author) -> None:
        self._session.add(AuthorTable(**author.model_dump()))

    # Books

    def get_books_for_author(self, author_id: str) -> list[Book]:
        statement = (
            select(BookTable)
            .where(BookTable.author_id == author_id)
            .order_by(BookTable.title, BookTable.id)
        )
        return [book_from_row(row) for row in self._session.exec(statement).all()]

    def get_book_for_author(self, author_id: str, book_id: str) -> Book | None:
        statement = select(BookTable).where(
            (BookTable.author_id == author_id) & (BookTable.id == book_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return book_from_row(row)

    def add_book_for_author(self, author_id: str, book: Book) -> None:
        book.author_id = author_id
        self._session.add(book_to_row(book))

    def update_book_for_author(self, book: Book) -> None:
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise ValueError(f"Book with id {book.id} not found")
        row.title = book.title
        row.description = book.description
        self._session.add(row)

    def delete_book(self, book: Book) -> None:
        row = self._session.get(BookTable, book.id)
        if row is not None:
            self._session.delete(row)

    def save(self) -> bool:
        try:
            self._session.commit()
        except SQLAlchemyError:
            logger.exception("Commit failed; rolling back staged changes")
            self._session.rollback()
            return False
        return True
