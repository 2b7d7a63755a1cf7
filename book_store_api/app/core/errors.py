"""
Domain exceptions raised by the book store.

Each exception carries the human readable ``message`` returned to the
client and the HTTP ``status_code`` it maps to.  The handler in
``main.py`` renders any ``BookStoreError`` as ``{"message": ...}``.
"""

from fastapi import status

BOOK_NOT_FOUND = "Book not found"
REQUIRED_FIELDS = "Title, author, and publishedYear are required"
INVALID_BODY = "Request body must be a JSON object"


class BookStoreError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookValidationError(BookStoreError):
    """Raised when a new book lacks one of the required fields."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = REQUIRED_FIELDS):
        super().__init__(message)


class BookNotFoundError(BookStoreError):
    """Raised when no stored book has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = BOOK_NOT_FOUND):
        super().__init__(message)
