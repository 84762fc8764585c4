"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="getBooks")
    async def get_books(self, info: strawberry.Info) -> list[Book]:
        """Get all books in insertion order."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field(name="getBooksCount")
    async def get_books_count(self, info: strawberry.Info) -> int:
        """Get the number of books."""
        from ..resolvers.book import resolve_books_count

        return await resolve_books_count(info)

    @strawberry.field(name="getBook")
    async def get_book(self, info: strawberry.Info, id: str | None = None) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)
