"""
Business logic for books.

``BookService`` implements the five operations of the books API on top
of a :class:`~reading_list_api.app.core.store.BookStore`.  Nothing is
validated: whatever the client sends for ``title``, ``author`` and
``finished`` is stored.  The only failure the service reports is a
missing book, raised as :class:`BookNotFoundError`.

Ids arrive from the URL as strings and are parsed to ``int`` before
they are compared with stored ids; a value that is not an integer
cannot name any book and is reported as not found.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Union

from ..core.store import BookStore
from ..schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)

# ASCII decimal digits only, no underscores.
BOOK_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)\s*")


class BookNotFoundError(LookupError):
    """No stored book has the requested id."""

    def __init__(self, book_id: Union[int, str]) -> None:
        super().__init__(f"Book {book_id!r} not found")
        self.book_id = book_id


def parse_book_id(raw: Union[int, str]) -> Optional[int]:
    """Convert a path parameter to a book id, or ``None`` if it is not one."""
    if isinstance(raw, int):
        return raw
    match = BOOK_ID_PATTERN.fullmatch(str(raw))
    if match is None:
        return None
    return int(match.group(1))


class BookService:
    """Сервис для управления списком книг."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def list_books(self) -> List[BookRead]:
        return self.store.all()

    def get_book(self, book_id: Union[int, str]) -> BookRead:
        """Return the book with ``book_id`` or raise :class:`BookNotFoundError`."""
        parsed = parse_book_id(book_id)
        book = self.store.find(parsed) if parsed is not None else None
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def create_book(self, data: BookCreate) -> BookRead:
        """Append a new book and return it.

        The id comes from the store's id strategy and ``createdAt`` is
        the current UTC time.
        """
        book = BookRead(
            id=self.store.next_id(),
            title=data.title,
            author=data.author,
            finished=data.finished,
            created_at=datetime.now(timezone.utc),
        )
        self.store.append(book)
        logger.info("Created book %s", book.id)
        return book

    def update_book(self, book_id: Union[int, str], data: BookUpdate) -> BookRead:
        """Replace the book with a copy carrying the provided fields.

        ``id`` and ``createdAt`` are always kept.  Fields missing from
        the request keep their current values; fields sent as ``null``
        are overwritten with ``null``.
        """
        current = self.get_book(book_id)
        changes = data.provided()
        updated = BookRead(
            id=current.id,
            title=changes.get("title", current.title),
            author=changes.get("author", current.author),
            finished=changes.get("finished", current.finished),
            created_at=current.created_at,
        )
        self.store.replace(current.id, updated)
        logger.info("Updated book %s (%s)", current.id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete_book(self, book_id: Union[int, str]) -> None:
        """Remove the book or raise :class:`BookNotFoundError`."""
        current = self.get_book(book_id)
        self.store.remove(current.id)
        logger.info("Deleted book %s", current.id)
