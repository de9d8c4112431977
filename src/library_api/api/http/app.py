"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from loguru import logger
from starlette.responses import JSONResponse

from src.library_api.api.http.app_data import ApplicationDependencies
from src.library_api.api.http.routers import health
from src.library_api.api.http.routers.service import authors, books
from src.library_api.api.utils.app_startup import configure_logging
from src.library_api.core.errors import (
    BadRequestError,
    CommitFailureError,
    ResourceNotFoundError,
    ValidationFailedError,
)
from src.library_api.core.services.database import DbManageService, DbSessionService
from src.library_api.core.services.patching import JsonPatchEngine
from src.library_api.runtime.config import ConfigData, load_config

__all__ = ["create_app"]


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
            route_name=getattr(request.scope.get("route"), "name", None),
        ).info("request.end")

        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Error mapping ---
def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResourceNotFoundError)
    async def not_found(request: Request, exc: ResourceNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "request_id": _request_id(request)},
        )

    @app.exception_handler(BadRequestError)
    async def bad_request(request: Request, exc: BadRequestError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "request_id": _request_id(request)},
        )

    @app.exception_handler(ValidationFailedError)
    async def validation_failed(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.as_dict(), "request_id": _request_id(request)},
        )

    @app.exception_handler(CommitFailureError)
    async def commit_failure(request: Request, exc: CommitFailureError):
        logger.opt(exception=exc).error("request.commit_failure")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error", "request_id": _request_id(request)},
        )


# --- Application factory ---
def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application from an explicit configuration.

    When ``config`` is omitted it is loaded once from ``config.yaml`` and the
    environment; nothing is kept in module-level state.
    """
    config = config or load_config()
    configure_logging(config)

    database_service = DbSessionService(config)
    deps = ApplicationDependencies(
        config=config,
        database_service=database_service,
        patch_engine=JsonPatchEngine(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up application in {} environment", config.app.environment)
        if config.database.create_tables:
            DbManageService(database_service.engine).create_all()
        try:
            yield
        finally:
            logger.info("Shutting down application")
            database_service.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title=config.app.title,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.app_dependencies = deps

    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(authors.router, prefix=config.app.api_prefix)
    app.include_router(books.router, prefix=config.app.api_prefix)

    return app


if __name__ == "__main__":
    import uvicorn

    app_config = load_config()
    uvicorn.run(
        create_app(app_config),
        host=app_config.app.host,
        port=app_config.app.port,
        access_log=False,  # request logs come from the middleware
    )
