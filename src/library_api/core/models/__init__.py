"""Wire representations exchanged with HTTP clients."""

from .author import AuthorDto, AuthorForCreation
from .book import (
    BookDto,
    BookForCreation,
    BookForManipulation,
    BookForUpdate,
    LinkedCollectionResource,
)
from .link import Link

__all__ = [
    "AuthorDto",
    "AuthorForCreation",
    "BookDto",
    "BookForCreation",
    "BookForManipulation",
    "BookForUpdate",
    "Link",
    "LinkedCollectionResource",
]
