"""Hypermedia link model."""

from pydantic import BaseModel, Field


class Link(BaseModel):
    """A follow-up action available on a returned resource."""

    href: str = Field(description="Absolute URL of the action")
    rel: str = Field(description="Relation name, e.g. 'self' or 'delete_book'")
    method: str = Field(description="HTTP method to use with href")
