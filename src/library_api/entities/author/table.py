"""Author database table model."""

from datetime import date

from sqlmodel import Field

from src.library_api.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    date_of_birth: date | None = None
    genre: str | None = Field(default=None, max_length=50)
