"""Book domain entity."""

from typing import Any

from pydantic import Field

from src.library_api.entities._base import Entity


class Book(Entity):
    """Book owned by an author.

    The identifier is generated on plain creation and supplied by the client
    on upsert. ``author_id`` does not change after creation.
    """

    author_id: str = Field(description="Identifier of the owning author")
    title: str = Field(description="Title")
    description: str = Field(default="", description="Description")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.author_id == other.author_id
            and self.title == other.title
            and self.description == other.description
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.author_id,
            self.title,
            self.description,
        ))
