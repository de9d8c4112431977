"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.core.repositories.library_repo import SqlLibraryRepository
from src.library_api.core.services.book_controller import BookResourceController
from src.library_api.core.services.links import LinkBuilder


class RequestUrlBuilder:
    """``UrlBuilder`` resolving route names against the current request."""

    def __init__(self, request: Request):
        self._request = request

    def link(self, route_name: str, **params: str) -> str:
        return str(self._request.url_for(route_name, **params))


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session scoped to the current request."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_library_repository(
    session: Session = Depends(get_db_session),
) -> SqlLibraryRepository:
    return SqlLibraryRepository(session)


def get_link_builder(request: Request) -> LinkBuilder:
    return LinkBuilder(RequestUrlBuilder(request))


def get_book_controller(
    request: Request,
    repository: SqlLibraryRepository = Depends(get_library_repository),
    links: LinkBuilder = Depends(get_link_builder),
) -> BookResourceController:
    """Assemble the book controller for one request."""
    app_deps = get_app_dependencies(request)
    return BookResourceController(repository, links, app_deps.patch_engine)
