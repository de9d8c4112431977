"""Author domain entity."""

from datetime import date
from typing import Any

from pydantic import Field

from src.library_api.entities._base import Entity


class Author(Entity):
    """Author aggregate owning zero or more books.

    Authors are only read by the book endpoints; their existence is the
    precondition for every book operation.
    """

    first_name: str = Field(description="Author's first name")
    last_name: str = Field(description="Author's last name")
    date_of_birth: date | None = Field(default=None, description="Date of birth")
    genre: str | None = Field(default=None, description="Main genre")

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes, ignoring timestamps."""
        if not isinstance(other, Author):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.date_of_birth == other.date_of_birth
            and self.genre == other.genre
        )

    def __hash__(self) -> int:
        return hash((self.id, self.first_name, self.last_name))
