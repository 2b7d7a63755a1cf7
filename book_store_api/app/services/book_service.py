"""
Business logic for books.

``BookStore`` owns an ordered, in-memory collection of book records
and implements list, get, create, update and delete on it.  Records
are plain dictionaries so that client supplied extra fields survive
untouched.  Lookups are linear scans; the collection is expected to
stay small.

One store is created per application (see ``main.create_app``) and
handed to request handlers through the ``get_book_store`` dependency.
A lock serialises every operation because FastAPI may run handlers
concurrently.
"""

from __future__ import annotations

import copy
import logging
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request
from pydantic import ValidationError

from ..core.errors import BookNotFoundError, BookValidationError
from ..schemas.book import BookCreate

logger = logging.getLogger(__name__)

SEED_BOOKS: List[Dict[str, Any]] = [
    {"id": "1", "title": "The Lord of the Rings", "author": "J.R.R. Tolkien", "publishedYear": 1954},
    {"id": "2", "title": "Pride and Prejudice", "author": "Jane Austen", "publishedYear": 1813},
    {"id": "3", "title": "1984", "author": "George Orwell", "publishedYear": 1949},
]


def next_book_id(books: Iterable[Dict[str, Any]]) -> str:
    """Return the id for a new book.

    The new id is one more than the largest id that parses as an
    integer, or ``"1"`` when there is none.  Ids that are not integers
    are ignored.
    """
    numeric_ids = []
    for book in books:
        try:
            numeric_ids.append(int(book["id"]))
        except (KeyError, TypeError, ValueError):
            continue
    if not numeric_ids:
        return "1"
    return str(max(numeric_ids) + 1)


class BookStore:
    """In-memory book collection kept in insertion order."""

    def __init__(self, books: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        self._books: List[Dict[str, Any]] = [dict(book) for book in books or []]
        self._lock = Lock()

    @classmethod
    def seeded(cls) -> "BookStore":
        """Create a store holding the three sample books."""
        return cls(SEED_BOOKS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    async def list_books(self) -> List[Dict[str, Any]]:
        """Return every book in insertion order."""
        with self._lock:
            return copy.deepcopy(self._books)

    async def get_book(self, book_id: str) -> Dict[str, Any]:
        """Return the book whose id equals ``book_id``.

        Raises ``BookNotFoundError`` when there is no such book.
        """
        with self._lock:
            index = self._find(book_id)
            if index is None:
                raise BookNotFoundError()
            return copy.deepcopy(self._books[index])

    async def create_book(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate ``data``, assign it a new id and append it.

        Any ``id`` present in ``data`` is overwritten.  Raises
        ``BookValidationError`` if ``title``, ``author`` or
        ``publishedYear`` is missing or of the wrong type.
        """
        try:
            BookCreate.model_validate(data)
        except ValidationError as exc:
            logger.info("Rejected new book: %s", exc.errors(include_url=False))
            raise BookValidationError() from exc

        book = copy.deepcopy(data)
        with self._lock:
            book["id"] = next_book_id(self._books)
            self._books.append(book)
        logger.info("Created book %s", book["id"])
        return copy.deepcopy(book)

    async def update_book(self, book_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``updates`` into the stored book and return the result.

        Supplied fields replace existing ones, other fields are kept and
        ``id`` always stays ``book_id``.  Raises ``BookNotFoundError``
        when there is no such book.
        """
        with self._lock:
            index = self._find(book_id)
            if index is None:
                raise BookNotFoundError()
            merged = {**self._books[index], **copy.deepcopy(updates), "id": book_id}
            self._books[index] = merged
        logger.info("Updated book %s", book_id)
        return copy.deepcopy(merged)

    async def delete_book(self, book_id: str) -> None:
        """Remove the book with ``book_id``.

        Raises ``BookNotFoundError`` when nothing was removed.
        """
        with self._lock:
            initial_length = len(self._books)
            self._books = [book for book in self._books if book["id"] != book_id]
            if len(self._books) == initial_length:
                raise BookNotFoundError()
        logger.info("Deleted book %s", book_id)

    def _find(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book["id"] == book_id:
                return index
        return None


def get_book_store(request: Request) -> BookStore:
    """Dependency provider returning the application's ``BookStore``."""
    return request.app.state.book_store
