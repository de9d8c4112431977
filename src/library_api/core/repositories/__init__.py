from .library_repo import LibraryRepository, SqlLibraryRepository

__all__ = ["LibraryRepository", "SqlLibraryRepository"]
