"""Book database table model."""

from sqlmodel import Field

from src.library_api.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Kept separate from the ``Book`` entity; the repository converts between
    the two.
    """

    author_id: str = Field(foreign_key="authortable.id", index=True)
    title: str = Field(max_length=100)
    description: str = Field(default="", max_length=500)
