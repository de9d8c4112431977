"""Entity package: Author."""

from .entity import Author
from .table import AuthorTable

__all__ = ["Author", "AuthorTable"]
