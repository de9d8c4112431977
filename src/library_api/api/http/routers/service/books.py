"""Book sub-resource router: /authors/{author_id}/books."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from src.library_api.api.http.deps import get_book_controller
from src.library_api.core.models.book import BookDto, LinkedCollectionResource
from src.library_api.core.services import links
from src.library_api.core.services.book_controller import (
    BookResourceController,
    MutationOutcome,
)

router = APIRouter(prefix="/authors/{author_id}/books", tags=["books"])

_CREATED_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_201_CREATED: {"model": BookDto, "description": "Book created"},
    status.HTTP_204_NO_CONTENT: {"description": "Book updated"},
}


def _mutation_response(outcome: MutationOutcome) -> Response:
    if outcome.created:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=jsonable_encoder(outcome.book),
            headers={"Location": outcome.location or ""},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    name=links.GET_BOOKS_FOR_AUTHOR,
    response_model=LinkedCollectionResource,
)
def get_books_for_author(
    author_id: UUID,
    controller: BookResourceController = Depends(get_book_controller),
) -> LinkedCollectionResource:
    """List the books of an author."""
    return controller.list_for_author(str(author_id))


@router.get("/{book_id}", name=links.GET_BOOK_FOR_AUTHOR, response_model=BookDto)
def get_book_for_author(
    author_id: UUID,
    book_id: UUID,
    controller: BookResourceController = Depends(get_book_controller),
) -> BookDto:
    """Get one book of an author."""
    return controller.get_one(str(author_id), str(book_id))


@router.post(
    "",
    name=links.CREATE_BOOK_FOR_AUTHOR,
    status_code=status.HTTP_201_CREATED,
    response_model=None,
    responses={status.HTTP_201_CREATED: {"model": BookDto}},
)
def create_book_for_author(
    author_id: UUID,
    payload: Any = Body(default=None),
    controller: BookResourceController = Depends(get_book_controller),
) -> Response:
    """Create a book; the server assigns its id."""
    return _mutation_response(controller.create(str(author_id), payload))


@router.put(
    "/{book_id}",
    name=links.UPDATE_BOOK_FOR_AUTHOR,
    response_model=None,
    responses=_CREATED_RESPONSE,
)
def update_book_for_author(
    author_id: UUID,
    book_id: UUID,
    payload: Any = Body(default=None),
    controller: BookResourceController = Depends(get_book_controller),
) -> Response:
    """Replace a book, creating it under ``book_id`` when it does not exist."""
    return _mutation_response(controller.replace(str(author_id), str(book_id), payload))


@router.patch(
    "/{book_id}",
    name=links.PARTIALLY_UPDATE_BOOK_FOR_AUTHOR,
    response_model=None,
    responses=_CREATED_RESPONSE,
)
def partially_update_book_for_author(
    author_id: UUID,
    book_id: UUID,
    operations: Any = Body(default=None),
    controller: BookResourceController = Depends(get_book_controller),
) -> Response:
    """Apply a JSON Patch document, creating the book when it does not exist."""
    return _mutation_response(
        controller.partially_update(str(author_id), str(book_id), operations)
    )


@router.delete(
    "/{book_id}",
    name=links.DELETE_BOOK_FOR_AUTHOR,
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
)
def delete_book_for_author(
    author_id: UUID,
    book_id: UUID,
    controller: BookResourceController = Depends(get_book_controller),
) -> Response:
    """Delete a book."""
    controller.delete(str(author_id), str(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
