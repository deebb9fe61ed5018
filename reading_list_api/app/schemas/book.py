"""
Pydantic schemas for books.

A book has an id assigned by the service, a title, an author, a
``finished`` flag telling whether it has been read, and a creation
timestamp.  Incoming bodies are deliberately permissive: ``title``,
``author`` and ``finished`` accept any JSON value and may be omitted,
and whatever the client sends is stored as‑is.
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

BOOK_EXAMPLE = {
    "title": "The Pragmatic Programmer",
    "author": "Andy Hunt / Dave Thomas",
    "finished": True,
}

BOOK_FIELDS = ("title", "author", "finished")


def body_fields(payload: Any) -> Dict[str, Any]:
    """Return ``payload`` if it is a JSON object, otherwise an empty one.

    Arrays, strings, numbers and a missing body all carry no book
    fields, so they behave like ``{}``.
    """
    return payload if isinstance(payload, dict) else {}


class BookCreate(BaseModel):
    """Schema for creating a new book.

    ``finished`` defaults to ``False`` only when the key is missing
    from the body; an explicit ``null`` is kept.
    """

    model_config = ConfigDict(json_schema_extra={"example": BOOK_EXAMPLE})

    title: Any = Field(None, description="The title of your book.")
    author: Any = Field(None, description="Who wrote the book?")
    finished: Any = Field(False, description="Have you finished reading it?")

    @classmethod
    def from_body(cls, payload: Any) -> "BookCreate":
        return cls.model_validate(body_fields(payload))


class BookUpdate(BaseModel):
    """Schema for updating an existing book.

    All fields are optional.  Only keys present in the request body
    are applied, so ``{"title": null}`` overwrites the title with
    ``null`` while ``{}`` changes nothing.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"finished": True}})

    title: Any = None
    author: Any = None
    finished: Any = None

    @classmethod
    def from_body(cls, payload: Any) -> "BookUpdate":
        return cls.model_validate(body_fields(payload))

    def provided(self) -> Dict[str, Any]:
        """Return the fields that were present in the request body."""
        return self.model_dump(include=set(BOOK_FIELDS), exclude_unset=True)


class BookRead(BaseModel):
    """Schema for reading a book."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={"example": {"id": 1, **BOOK_EXAMPLE, "createdAt": "2020-01-01T00:00:00Z"}},
    )

    id: int = Field(..., description="The auto-generated id of the book.")
    title: Any = Field(None, description="The title of your book.")
    author: Any = Field(None, description="Who wrote the book?")
    finished: Any = Field(False, description="Have you finished reading it?")
    created_at: datetime = Field(
        ..., alias="createdAt", description="The date of the record creation."
    )
