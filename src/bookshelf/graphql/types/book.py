"""
Book GraphQL type definitions
"""

from enum import Enum

import strawberry


@strawberry.enum
class Genre(Enum):
    """Book genre enumeration. NONE marks an unset genre."""

    NONE = "NONE"
    FICTION = "FICTION"
    MYSTERY = "MYSTERY"
    FANTASY = "FANTASY"
    ROMANCE = "ROMANCE"


@strawberry.type
class Author:
    """Author of a book, derived from the book's own author fields."""

    name: str
    nationality: str | None


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: str
    title: str
    description: str | None
    isbn: str | None
    publisher: str
    genre: Genre
    publish_year: int | None

    # Stored on the book but only exposed through the author field
    author_name: strawberry.Private[str]
    author_nationality: strawberry.Private[str | None]

    @strawberry.field
    def author(self) -> Author:
        """Get the author of this book."""
        from ..resolvers.book import resolve_book_author

        return resolve_book_author(self)
