"""
Main entrypoint for the Records API.

This module assembles the FastAPI application, sets up logging,
wires the storage adapter into the record service and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so that it can be served directly, e.g.::

    uvicorn records_api.app.main:app --reload

Tests call ``create_app(storage=InMemoryRecordStorage())`` to get an
isolated application.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import InfrastructureError
from .core.logging_config import setup_logging
from .services.record_service import RecordService
from .storage.base import RecordStorage
from .storage.memory_storage import InMemoryRecordStorage
from .storage.sqlite_storage import SQLiteRecordStorage

logger = logging.getLogger(__name__)


def build_storage(backend: Optional[str] = None) -> RecordStorage:
    """Create the storage adapter named by ``backend`` (default from settings)."""
    backend = (backend or settings.storage_backend).lower()
    if backend == "memory":
        return InMemoryRecordStorage()
    if backend == "sqlite":
        return SQLiteRecordStorage()
    raise ValueError(f"Unknown storage backend {backend!r}; expected 'sqlite' or 'memory'")


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``"body.email: Field required; ..."``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def create_app(storage: Optional[RecordStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[RecordStorage]
        Storage adapter handed to the record service.  When omitted,
        one is built from ``settings.storage_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    if storage is None:
        storage = build_storage()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.record_service = RecordService(storage)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(exc)
        logger.info("Malformed request %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})

    @app.exception_handler(InfrastructureError)
    async def infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
        logger.error(
            "Infrastructure failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Only the SQLite backend has a schema to migrate.
        if isinstance(storage, SQLiteRecordStorage):
            version = init_db(storage.database_path)
            logger.info("Database %s at schema version %s", storage.database_path, version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
