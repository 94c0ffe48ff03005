"""
Main entrypoint for the Automytee content API.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and installs the exception handlers that
turn every failure into the ``{"success": false, "error": ...}``
envelope.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn automytee_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import close_db, init_db
from .core.exceptions import ContentError, ValidationError
from .core.logging_config import setup_logging
from .schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorEnvelope(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def content_error_handler(request: Request, exc: ContentError) -> JSONResponse:
    """Render service errors with the status code their class declares."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    details = exc.details() if isinstance(exc, ValidationError) else None
    return error_response(exc.status_code, exc.message, details)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing JSON bodies are plain 400s, not 422s."""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "rule": err.get("type", "invalid"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc) or exc.__class__.__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")

    app.add_exception_handler(ContentError, content_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Fails fast when MONGODB_URI is missing.
        init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
