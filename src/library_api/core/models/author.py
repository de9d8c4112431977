"""Author payloads and responses."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AuthorForCreation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    date_of_birth: date | None = None
    genre: str | None = Field(default=None, max_length=50)


class AuthorDto(BaseModel):
    id: str
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    genre: str | None = None
