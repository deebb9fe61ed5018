"""
In‑memory storage for books.

``BookStore`` owns the one ordered collection of books that the
service works on.  A single store is built by ``create_app`` and kept
on ``app.state`` for the lifetime of the process; nothing else holds
a reference to the underlying list.  Records are kept in insertion
order, deletions remove an element in place and updates replace an
element at the position it already occupies.

Lookups are linear scans by id value.  At the sizes this service is
meant for that is plenty; a dict keyed by id would be the next step
for a larger collection.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..schemas.book import BookRead
from .config import ID_STRATEGIES

logger = logging.getLogger(__name__)


class SeedError(RuntimeError):
    """Raised when the seed file cannot be turned into books."""


class BookStore:
    """Ordered in‑memory collection of :class:`BookRead` records.

    Parameters
    ----------
    id_strategy : str
        ``"length"`` assigns ``len(store) + 1`` to a new book, which is
        what clients of this service have always observed but can hand
        out an id that is still in use once a book has been deleted.
        ``"counter"`` assigns one more than the highest id ever issued
        and never reuses an id.
    books : Iterable[BookRead], optional
        Initial contents, in order.
    """

    def __init__(self, id_strategy: str = "length", books: Optional[Iterable[BookRead]] = None) -> None:
        if id_strategy not in ID_STRATEGIES:
            logger.warning("Unknown id strategy %r, falling back to 'length'", id_strategy)
            id_strategy = "length"
        self.id_strategy = id_strategy
        self._books: List[BookRead] = []
        self._last_id = 0
        for book in books or ():
            self.append(book)

    def __len__(self) -> int:
        return len(self._books)

    def all(self) -> List[BookRead]:
        """Return a snapshot of the collection in insertion order."""
        return list(self._books)

    def find(self, book_id: int) -> Optional[BookRead]:
        """Return the first book whose id equals ``book_id``, or ``None``."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def next_id(self) -> int:
        if self.id_strategy == "counter":
            return self._last_id + 1
        return len(self._books) + 1

    def append(self, book: BookRead) -> None:
        self._books.append(book)
        self._last_id = max(self._last_id, book.id)

    def replace(self, book_id: int, book: BookRead) -> bool:
        """Swap the book with ``book_id`` for ``book`` at the same position.

        Returns ``True`` if a record was replaced, ``False`` otherwise.
        """
        index = self._index_of(book_id)
        if index is None:
            return False
        self._books[index] = book
        return True

    def remove(self, book_id: int) -> bool:
        """Remove the book with ``book_id``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        index = self._index_of(book_id)
        if index is None:
            return False
        del self._books[index]
        return True

    def _index_of(self, book_id: int) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def load_seed(self, path: str) -> int:
        """Append the books listed in the JSON file at ``path``.

        The file must contain a JSON array of objects.  Entries without
        an ``id`` get one from :meth:`next_id`, a missing ``finished``
        becomes ``False`` and a missing ``createdAt`` becomes the load
        time.  Returns the number of books loaded.
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SeedError(f"Cannot read seed file {path}: {exc}") from exc
        if not isinstance(raw, list):
            raise SeedError(f"Seed file {path} must contain a JSON array")

        loaded_at = datetime.now(timezone.utc)
        for position, entry in enumerate(raw):
            self.append(self._seed_entry_to_book(entry, position, loaded_at))
        logger.info("Loaded %d books from %s", len(raw), path)
        return len(raw)

    def _seed_entry_to_book(self, entry: Any, position: int, loaded_at: datetime) -> BookRead:
        if not isinstance(entry, dict):
            raise SeedError(f"Seed entry {position} is not an object")
        data = dict(entry)
        data.setdefault("id", self.next_id())
        data.setdefault("finished", False)
        data.setdefault("createdAt", loaded_at)
        try:
            return BookRead.model_validate(data)
        except ValidationError as exc:
            raise SeedError(f"Seed entry {position} is invalid: {exc}") from exc
