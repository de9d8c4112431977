"""Book payloads and responses.

``BookForCreation`` and ``BookForUpdate`` are candidate states: they are
validated and then projected onto a persisted ``Book``; they are never stored
themselves.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.library_api.core.models.link import Link

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class BookForManipulation(BaseModel):
    """Fields a client may set on a book."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=TITLE_MAX_LENGTH, description="Title")
    description: str = Field(
        default="", max_length=DESCRIPTION_MAX_LENGTH, description="Description"
    )


class BookForCreation(BookForManipulation):
    """Payload accepted by POST."""


class BookForUpdate(BookForManipulation):
    """Payload accepted by PUT and the document JSON Patch operates on."""


class BookDto(BaseModel):
    """Book as returned to clients."""

    id: str
    author_id: str
    title: str
    description: str
    links: list[Link] = Field(default_factory=list)


class LinkedCollectionResource(BaseModel):
    """A collection of resources carrying its own links."""

    value: list[BookDto] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
