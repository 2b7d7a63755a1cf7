"""
Pydantic models for book data.

Books have an open schema: besides ``title``, ``author`` and
``publishedYear`` a client may attach arbitrary fields, which are
stored verbatim.  ``BookCreate`` describes what a new book must
contain; ``BookRead`` is what the API returns.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, confloat

FiniteFloat = confloat(strict=True, allow_inf_nan=False)


class BookCreate(BaseModel):
    """Schema for creating a book.

    ``title`` and ``author`` must be non-empty strings and
    ``publishedYear`` must be a finite number.  Booleans are not numbers
    here.
    """

    title: StrictStr = Field(..., min_length=1, examples=["Dune"])
    author: StrictStr = Field(..., min_length=1, examples=["Frank Herbert"])
    publishedYear: Union[StrictInt, FiniteFloat] = Field(..., examples=[1965])

    model_config = ConfigDict(extra="allow")


class BookRead(BaseModel):
    """Schema for reading a book from the API.

    Updates are shallow merges that are not validated, so the stored
    field values are passed through as they are.
    """

    id: str
    title: Any = None
    author: Any = None
    publishedYear: Any = None

    model_config = ConfigDict(extra="allow")


class Message(BaseModel):
    """Error body returned for 400 and 404 responses."""

    message: str = Field(..., examples=["Book not found"])
