"""Book sub-resource operations.

``BookResourceController`` sequences the collaborators for one request:

    author check -> payload/patch -> validation -> repository mutation -> commit

PUT and PATCH share one upsert step with two states. When the target book is
absent the candidate is inserted under the client-supplied id and the outcome
is ``CREATED``; when it exists the candidate is merged onto the stored book and
the outcome is ``UPDATED``. Nothing reaches the repository before the
candidate has passed validation.

Concurrent upserts on the same book are not guarded: the last commit wins.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger

from src.library_api.core.errors import (
    BadRequestError,
    CommitFailureError,
    ResourceNotFoundError,
)
from src.library_api.core.models.book import (
    BookDto,
    BookForCreation,
    BookForUpdate,
    LinkedCollectionResource,
)
from src.library_api.core.repositories.library_repo import LibraryRepository
from src.library_api.core.services import mapping
from src.library_api.core.services.links import LinkBuilder
from src.library_api.core.services.patching import PatchEngine, PatchError
from src.library_api.core.services.validation import BookValidator
from src.library_api.entities import Book


class MutationStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class MutationOutcome:
    """Result of a successful mutation.

    ``book`` and ``location`` are only set when a resource was created.
    """

    status: MutationStatus
    book: BookDto | None = None
    location: str | None = None

    @property
    def created(self) -> bool:
        return self.status is MutationStatus.CREATED


class BookResourceController:
    """Create, read, upsert, patch and delete the books of an author."""

    def __init__(
        self,
        repository: LibraryRepository,
        links: LinkBuilder,
        patch_engine: PatchEngine,
        creation_validator: BookValidator[BookForCreation] | None = None,
        update_validator: BookValidator[BookForUpdate] | None = None,
    ):
        self._repository = repository
        self._links = links
        self._patch_engine = patch_engine
        self._creation_validator = creation_validator or BookValidator(BookForCreation)
        self._update_validator = update_validator or BookValidator(BookForUpdate)

    # Reads

    def list_for_author(self, author_id: str) -> LinkedCollectionResource:
        self._require_author(author_id)
        books = self._repository.get_books_for_author(author_id)
        return self._links.for_books(author_id, (mapping.book_to_dto(b) for b in books))

    def get_one(self, author_id: str, book_id: str) -> BookDto:
        self._require_author(author_id)
        book = self._require_book(author_id, book_id)
        return self._links.for_book(mapping.book_to_dto(book))

    # Mutations

    def create(self, author_id: str, payload: Any) -> MutationOutcome:
        self._require_author(author_id)
        self._require_payload(payload)

        candidate = self._creation_validator.validate(payload)
        book = mapping.book_from_payload(candidate, author_id)
        self._repository.add_book_for_author(author_id, book)
        self._commit(f"Creating a book for author {author_id} failed on save.")

        logger.info("book.created", author_id=author_id, book_id=book.id)
        return self._created(book)

    def replace(self, author_id: str, book_id: str, payload: Any) -> MutationOutcome:
        """Full replace; creates the book under ``book_id`` when absent."""
        self._require_author(author_id)
        self._require_payload(payload)

        candidate = self._update_validator.validate(payload)
        existing = self._repository.get_book_for_author(author_id, book_id)
        return self._upsert(author_id, book_id, existing, candidate, action="Updating")

    def partially_update(
        self, author_id: str, book_id: str, operations: Any
    ) -> MutationOutcome:
        """Apply a JSON Patch document; creates the book when absent.

        An absent book is patched starting from an empty document, so only
        ``add`` operations can populate it.
        """
        self._require_author(author_id)
        if operations is None:
            raise BadRequestError("A JSON Patch document is required")

        existing = self._repository.get_book_for_author(author_id, book_id)
        document = mapping.update_view(existing) if existing is not None else {}
        try:
            patched = self._patch_engine.apply(document, operations)
        except PatchError as exc:
            logger.warning("Rejected patch for book {}: {}", book_id, exc)
            raise BadRequestError(f"Invalid patch document: {exc}") from exc

        candidate = self._update_validator.validate(patched)
        return self._upsert(author_id, book_id, existing, candidate, action="Patching")

    def delete(self, author_id: str, book_id: str) -> MutationOutcome:
        self._require_author(author_id)
        book = self._require_book(author_id, book_id)

        self._repository.delete_book(book)
        self._commit(f"Deleting book {book_id} failed on save.")

        logger.info("book.deleted", author_id=author_id, book_id=book_id)
        return MutationOutcome(MutationStatus.DELETED)

    # Helpers

    def _upsert(
        self,
        author_id: str,
        book_id: str,
        existing: Book | None,
        candidate: BookForUpdate,
        action: str,
    ) -> MutationOutcome:
        if existing is None:
            book = mapping.book_from_payload(candidate, author_id, book_id=book_id)
            self._repository.add_book_for_author(author_id, book)
            self._commit(f"Upserting book {book_id} for author {author_id} failed on save.")
            logger.info("book.upserted", author_id=author_id, book_id=book_id)
            return self._created(book)

        updated = mapping.apply_payload(candidate, existing)
        self._repository.update_book_for_author(updated)
        self._commit(f"{action} book {book_id} for author {author_id} failed on save.")
        logger.info("book.updated", author_id=author_id, book_id=book_id)
        return MutationOutcome(MutationStatus.UPDATED)

    def _created(self, book: Book) -> MutationOutcome:
        return MutationOutcome(
            MutationStatus.CREATED,
            book=self._links.for_book(mapping.book_to_dto(book)),
            location=self._links.book_location(book.author_id, book.id),
        )

    def _require_payload(self, payload: Any) -> None:
        if payload is None:
            raise BadRequestError("A book payload is required")
        if not isinstance(payload, Mapping):
            raise BadRequestError("A book payload must be a JSON object")

    def _require_author(self, author_id: str) -> None:
        if not self._repository.author_exists(author_id):
            raise ResourceNotFoundError(f"Author {author_id} not found")

    def _require_book(self, author_id: str, book_id: str) -> Book:
        book = self._repository.get_book_for_author(author_id, book_id)
        if book is None:
            raise ResourceNotFoundError(f"Book {book_id} not found for author {author_id}")
        return book

    def _commit(self, failure_message: str) -> None:
        if not self._repository.save():
            logger.error(failure_message)
            raise CommitFailureError(failure_message)
