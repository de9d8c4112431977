"""Shared identity and timestamp fields for library entities.

Books and authors are addressed by string UUIDs. The server generates the id
on plain creation; an upsert through PUT or PATCH stores the id the client put
in the URL instead, so ids are never assumed to be server-generated.
"""

import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def new_id() -> str:
    """Server-side identifier for a resource created without a client id."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Domain-side fields common to authors and books.

    ``id`` may be overridden by the caller; ``updated_at`` is only advisory on
    the domain side, the table keeps the authoritative value.
    """

    id: str = PydanticField(
        default_factory=new_id, description="Resource identifier (UUID string)"
    )
    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Persistence-side fields common to ``AuthorTable`` and ``BookTable``.

    The primary key is a plain string so client-supplied upsert ids are stored
    as given. A second insert under an existing id fails at commit with a
    primary-key violation, which the repository reports as a failed save.
    ``updated_at`` is refreshed by the database on every UPDATE.
    """

    id: str = Field(
        primary_key=True,
        default_factory=new_id,
        description="Resource identifier (UUID string)",
    )
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
