"""Book Store API client.

This module defines a thin client wrapper around the Book Store HTTP
API using the ``requests`` library.  It exposes one method per
operation:

* :meth:`BookStoreAPI.list_books` – return every stored book.
* :meth:`BookStoreAPI.get_book` – fetch a single book by its identifier.
* :meth:`BookStoreAPI.create_book` – add a new book.
* :meth:`BookStoreAPI.update_book` – merge fields into an existing book.
* :meth:`BookStoreAPI.delete_book` – remove a book.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``error`` is a dictionary
with ``status_code`` and ``message`` keys, where ``message`` is the
server's error text when one was returned.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookStoreAPI:
    """Client for interacting with the Book Store API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            response (``None`` for empty bodies).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all books.

        Returns:
            A tuple ``(books, error)``.  ``books`` is empty on failure.
        """
        data, error = self._request("GET", "/books")
        if error:
            return [], error
        return data or [], None

    def get_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single book by ID."""
        return self._request("GET", f"/books/{book_id}")

    def create_book(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a book.

        Args:
            payload: Book fields; ``title``, ``author`` and
                ``publishedYear`` are required by the server.
        Returns:
            A tuple ``(book, error)``; ``book`` carries the assigned id.
        """
        return self._request("POST", "/books", json_body=payload)

    def update_book(self, book_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``payload`` into the book with ``book_id``."""
        return self._request("PUT", f"/books/{book_id}", json_body=payload)

    def delete_book(self, book_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a book.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/books/{book_id}")
        if error:
            return False, error
        return True, None
