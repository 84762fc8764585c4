"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book, Genre


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str,
        publisher: str,
        genre: Genre,
        author_name: str,
        description: str | None = None,
        isbn: str | None = None,
        publish_year: int | None = None,
        author_nationality: str | None = None,
    ) -> Book | None:
        """Add a new book. The title must not already be in use."""
        from ..resolvers.book import add_book

        return await add_book(
            info,
            title=title,
            description=description,
            isbn=isbn,
            publisher=publisher,
            genre=genre,
            publish_year=publish_year,
            author_name=author_name,
            author_nationality=author_nationality,
        )

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self,
        info: strawberry.Info,
        id: str,
        title: str | None = None,
        description: str | None = None,
        isbn: str | None = None,
        publisher: str | None = None,
        genre: Genre | None = None,
        publish_year: int | None = None,
        author_name: str | None = None,
        author_nationality: str | None = None,
    ) -> Book | None:
        """Update an existing book. Omitted arguments keep their current value."""
        from ..resolvers.book import update_book

        return await update_book(
            info,
            id,
            title=title,
            description=description,
            isbn=isbn,
            publisher=publisher,
            genre=genre,
            publish_year=publish_year,
            author_name=author_name,
            author_nationality=author_nationality,
        )

    @strawberry.mutation(name="deleteBook")
    async def delete_book(self, info: strawberry.Info, id: str) -> Book | None:
        """Delete a book, returning it."""
        from ..resolvers.book import delete_book

        return await delete_book(info, id)
