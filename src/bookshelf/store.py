"""
In-memory book store
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any

# Message returned to clients when a title is already taken
DUPLICATE_TITLE_MESSAGE = "Título es una valor único"


class DuplicateTitleError(ValueError):
    """Raised when a book is added with a title that already exists in the store."""

    def __init__(self, title: str):
        super().__init__(DUPLICATE_TITLE_MESSAGE)
        self.title = title


class DuplicateIdError(ValueError):
    """Raised when a record is added under an id the store already holds."""

    def __init__(self, book_id: str):
        super().__init__(f"Book id already in use: {book_id}")
        self.book_id = book_id


@dataclass(frozen=True)
class BookRecord:
    """A stored book. Author data is kept denormalized on the record."""

    id: str
    title: str
    publisher: str
    genre: str
    author_name: str
    description: str | None = None
    isbn: str | None = None
    publish_year: int | None = None
    author_nationality: str | None = None


# Fields a caller may change through update(); id is immutable
UPDATABLE_FIELDS = tuple(f.name for f in fields(BookRecord) if f.name != "id")


def generate_book_id() -> str:
    """Generate a new opaque book identifier."""
    return str(uuid.uuid4())


class BookStore:
    """Ordered, process-local collection of books.

    Records are kept in insertion order. Every read and write holds the store
    lock so the checks and append in add() stay atomic across threads. Records
    passed to the constructor go through add() as well.
    """

    def __init__(self, records: Iterable[BookRecord] = ()):
        self._books: list[BookRecord] = []
        self._lock = threading.RLock()
        for record in records:
            self.add(record)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, book_id: object) -> bool:
        return isinstance(book_id, str) and self.get(book_id) is not None

    def list_books(self) -> list[BookRecord]:
        """Return the books in insertion order."""
        with self._lock:
            return list(self._books)

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def get(self, book_id: str) -> BookRecord | None:
        """Return the first book with the given id, or None."""
        with self._lock:
            index = self._index_of(book_id)
            return self._books[index] if index is not None else None

    def find_by_title(self, title: str) -> BookRecord | None:
        with self._lock:
            return next((book for book in self._books if book.title == title), None)

    def add(self, record: BookRecord) -> BookRecord:
        """Append a record, rejecting duplicate ids and titles.

        Raises:
            DuplicateIdError: If a stored book already has this id
            DuplicateTitleError: If a stored book already has this title
        """
        with self._lock:
            if self._index_of(record.id) is not None:
                raise DuplicateIdError(record.id)
            if self.find_by_title(record.title) is not None:
                raise DuplicateTitleError(record.title)
            self._books.append(record)
            return record

    def create(self, **values: Any) -> BookRecord:
        """Build a record with a freshly generated id and add it."""
        record = BookRecord(id=generate_book_id(), **values)
        return self.add(record)

    def update(self, book_id: str, changes: dict[str, Any]) -> BookRecord | None:
        """Merge changes into the book with the given id.

        Values that are None are treated as not supplied and keep the stored
        value. Titles are not re-checked for uniqueness here.

        Returns:
            The merged record, or None if no book has this id
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        supplied = {name: value for name, value in changes.items() if value is not None}

        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None

            updated = replace(self._books[index], **supplied)
            self._books[index] = updated
            return updated

    def delete(self, book_id: str) -> BookRecord | None:
        """Remove and return the book with the given id, or None if absent."""
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            return self._books.pop(index)

    def _index_of(self, book_id: str) -> int | None:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
