from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger
from ...store import BookRecord, BookStore, DuplicateTitleError
from ..errors import BadUserInputError

if TYPE_CHECKING:
    from ..types.book import Author, Book, Genre

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Get the book store placed in the GraphQL context by the router."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("Book store is not configured in the GraphQL context")
    return store


def to_graphql_book(record: BookRecord) -> Book:
    """Convert a stored record to the GraphQL Book type."""
    from ..types.book import Book as BookType
    from ..types.book import Genre as GenreType

    return BookType(
        id=record.id,
        title=record.title,
        description=record.description,
        isbn=record.isbn,
        publisher=record.publisher,
        genre=GenreType(record.genre),
        publish_year=record.publish_year,
        author_name=record.author_name,
        author_nationality=record.author_nationality,
    )


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve all books in insertion order."""
    store = get_store_from_info(info)
    return [to_graphql_book(record) for record in store.list_books()]


async def resolve_books_count(info: strawberry.Info) -> int:
    """Resolve the number of stored books."""
    return get_store_from_info(info).count()


async def resolve_book_by_id(info: strawberry.Info, id: str | None) -> Book | None:
    """
    Resolve a book by its ID.

    An unknown or missing id resolves to null rather than an error.
    """
    if id is None:
        return None

    record = get_store_from_info(info).get(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None

    return to_graphql_book(record)


# Field resolvers
def resolve_book_author(book: Book) -> Author:
    """Project the author fields stored on a book into an Author."""
    from ..types.book import Author as AuthorType

    return AuthorType(name=book.author_name, nationality=book.author_nationality)


# Mutation resolvers
async def add_book(
    info: strawberry.Info,
    *,
    title: str,
    publisher: str,
    genre: Genre,
    author_name: str,
    description: str | None = None,
    isbn: str | None = None,
    publish_year: int | None = None,
    author_nationality: str | None = None,
) -> Book:
    """
    Add a new book.

    Titles must be unique; a duplicate is rejected with BAD_USER_INPUT and
    the store is left untouched.
    """
    store = get_store_from_info(info)

    try:
        record = store.create(
            title=title,
            description=description,
            isbn=isbn,
            publisher=publisher,
            genre=genre.value,
            publish_year=publish_year,
            author_name=author_name,
            author_nationality=author_nationality,
        )
    except DuplicateTitleError as e:
        logger.info("Rejected book with duplicate title", title=e.title)
        raise BadUserInputError(str(e)) from e

    logger.info("Book added", book_id=record.id, title=record.title)

    return to_graphql_book(record)


async def update_book(info: strawberry.Info, id: str, **changes: Any) -> Book | None:
    """
    Update an existing book.

    Only arguments supplied with a non-null value replace the stored value.
    Falsy values such as an empty string or zero are written as given.
    Returns null when no book has this id.
    """
    store = get_store_from_info(info)

    genre = changes.get("genre")
    if genre is not None:
        changes["genre"] = genre.value

    record = store.update(id, changes)
    if record is None:
        logger.debug("Book not found for update", book_id=id)
        return None

    logger.info(
        "Book updated",
        book_id=record.id,
        updated_fields=[k for k, v in changes.items() if v is not None],
    )

    return to_graphql_book(record)


async def delete_book(info: strawberry.Info, id: str) -> Book | None:
    """
    Delete a book.

    Returns the removed book, or null when no book has this id.
    """
    record = get_store_from_info(info).delete(id)
    if record is None:
        logger.debug("Book not found for delete", book_id=id)
        return None

    logger.info("Book deleted", book_id=record.id, title=record.title)

    return to_graphql_book(record)
