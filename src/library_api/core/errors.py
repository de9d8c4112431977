"""Errors raised by the book resource operations.

``ResourceNotFoundError``, ``BadRequestError`` and ``ValidationFailedError``
are expected outcomes and become 404/400/422 responses. ``CommitFailureError``
is an infrastructure fault: it is never retried and becomes a 500.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.library_api.core.services.validation import FieldError


class LibraryError(Exception):
    """Base class for all errors raised by the library core."""


class ResourceNotFoundError(LibraryError):
    """The author or the book addressed by the request does not exist."""


class BadRequestError(LibraryError):
    """The payload or patch document is absent or structurally malformed."""


class ValidationFailedError(LibraryError):
    """The candidate state violates a structural or domain rule."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: list[FieldError] = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    def as_dict(self) -> dict[str, list[str]]:
        """Group messages by field, preserving rule order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class CommitFailureError(LibraryError):
    """The repository reported a failed commit after staging a mutation."""
