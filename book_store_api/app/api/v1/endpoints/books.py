"""
Book endpoints for API v1.

These routes expose CRUD operations on the in-memory book collection.
Request bodies are taken as plain JSON objects because books have an
open schema; validation of new books happens in ``BookStore``.
Domain errors propagate to the handler registered in ``main.py``,
which renders them as ``{"message": ...}``.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from book_store_api.app.schemas.book import BookRead, Message
from book_store_api.app.services.book_service import BookStore, get_book_store

router = APIRouter()
logger = logging.getLogger(__name__)

NEW_BOOK_EXAMPLE = {"title": "Dune", "author": "Frank Herbert", "publishedYear": 1965}


@router.get("", response_model=List[BookRead])
async def list_books(store: BookStore = Depends(get_book_store)) -> List[Dict[str, Any]]:
    """Return all books in insertion order."""
    logger.info("GET /books request received")
    return await store.list_books()


@router.get("/{book_id}", response_model=BookRead, responses={404: {"model": Message}})
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Retrieve a single book by its ID."""
    logger.info("GET /books/%s request received", book_id)
    return await store.get_book(book_id)


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Message}},
)
async def create_book(
    payload: Optional[Dict[str, Any]] = Body(None, examples=[NEW_BOOK_EXAMPLE]),
    store: BookStore = Depends(get_book_store),
) -> Dict[str, Any]:
    """Add a new book.

    ``title``, ``author`` and ``publishedYear`` are required.  The id
    is assigned by the server; a client supplied ``id`` is ignored.
    """
    logger.info("POST /books request received with body: %s", payload)
    return await store.create_book(payload or {})


@router.put("/{book_id}", response_model=BookRead, responses={404: {"model": Message}})
async def update_book(
    book_id: str,
    payload: Optional[Dict[str, Any]] = Body(None, examples=[{"publishedYear": 1966}]),
    store: BookStore = Depends(get_book_store),
) -> Dict[str, Any]:
    """Merge the supplied fields into an existing book.

    Fields that are not supplied keep their values and the ``id`` in
    the path always wins over an ``id`` in the body.
    """
    logger.info("PUT /books/%s request received with body: %s", book_id, payload)
    return await store.update_book(book_id, payload or {})


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Message}},
)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Response:
    """Delete a book by its ID."""
    logger.info("DELETE /books/%s request received", book_id)
    await store.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
