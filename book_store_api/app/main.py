"""
Main entrypoint for the Book Store API.

This module assembles the FastAPI application, sets up logging, error
handlers and the versioned routers.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn book_store_api.app.main:app --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import INVALID_BODY, BookStoreError
from .core.logging_config import setup_logging
from .services.book_service import BookStore

logger = logging.getLogger(__name__)

ENDPOINTS = (
    "GET /books - Get all books",
    "GET /books/{id} - Get a book by ID",
    "POST /books - Add a new book (requires {title, author, publishedYear} in body)",
    "PUT /books/{id} - Update a book by ID",
    "DELETE /books/{id} - Delete a book by ID",
)


async def book_store_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": INVALID_BODY})


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[BookStore]
        Store to serve.  When omitted a new store is created, seeded
        with the sample books unless ``settings.seed_books`` is false.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if store is None:
        store = BookStore.seeded() if settings.seed_books else BookStore()
    app.state.book_store = store

    app.add_exception_handler(BookStoreError, book_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # The book routes are served at the root (``/books``) and, for
    # clients that expect versioned paths, under ``/api/v1`` as well.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok", "books": len(app.state.book_store)}

    @app.on_event("startup")
    async def log_endpoints() -> None:
        logger.info("%s serving %d books", settings.project_name, len(app.state.book_store))
        logger.info("Available endpoints:")
        for line in ENDPOINTS:
            logger.info("  %s", line)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
