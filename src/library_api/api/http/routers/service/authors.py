"""Author API router.

Authors are only registered and read here; the book endpoints require them to
exist.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from src.library_api.api.http.deps import get_library_repository
from src.library_api.core.errors import CommitFailureError
from src.library_api.core.models.author import AuthorDto, AuthorForCreation
from src.library_api.core.repositories.library_repo import SqlLibraryRepository
from src.library_api.core.services.mapping import author_from_payload, author_to_dto

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", name="get_authors", response_model=list[AuthorDto])
def get_authors(
    repository: SqlLibraryRepository = Depends(get_library_repository),
) -> list[AuthorDto]:
    """List all authors."""
    return [author_to_dto(author) for author in repository.get_authors()]


@router.get("/{author_id}", name="get_author", response_model=AuthorDto)
def get_author(
    author_id: UUID,
    repository: SqlLibraryRepository = Depends(get_library_repository),
) -> AuthorDto:
    """Get an author by ID."""
    author = repository.get_author(str(author_id))
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author_to_dto(author)


@router.post(
    "",
    name="create_author",
    response_model=AuthorDto,
    status_code=status.HTTP_201_CREATED,
)
def create_author(
    payload: AuthorForCreation,
    request: Request,
    response: Response,
    repository: SqlLibraryRepository = Depends(get_library_repository),
) -> AuthorDto:
    """Register a new author."""
    author = author_from_payload(payload)
    repository.add_author(author)
    if not repository.save():
        raise CommitFailureError("Creating an author failed on save.")

    response.headers["Location"] = str(request.url_for("get_author", author_id=author.id))
    return author_to_dto(author)
