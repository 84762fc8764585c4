"""
Sample data for a freshly started store.

The two books below are loaded at startup when ``seed_sample_data`` is enabled,
so a new server answers queries without any prior mutations.
"""

from __future__ import annotations

from .logging import get_logger
from .store import BookRecord, BookStore

logger = get_logger(__name__)

SAMPLE_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(
        id="d26fd654-f4d4-4b98-91e5-6d8c9569aed6",
        title="The Awakening",
        description="The Awakening es una novela de la escritora estadounidense Kate Chopin.",
        publisher="W W Norton & Co Inc",
        genre="NONE",
        publish_year=1899,
        author_name="Kate Chopin",
    ),
    BookRecord(
        id="35b19ead-3aa9-415e-a46d-6621e1604119",
        title="City of Glass",
        description=(
            "Ciudad de cristal es el tercer libro de la saga Cazadores de Sombras, "
            "escrita por Cassandra Clare. Fue publicada originalmente en Estados Unidos."
        ),
        isbn="978-0140097313",
        publisher="Simon & Schuster",
        genre="FANTASY",
        publish_year=2009,
        author_name="Paul Auster",
        author_nationality="Estadounidense",
    ),
)


def seed_sample_books(store: BookStore) -> int:
    """
    Load the sample books into a store.

    Books whose id is already present are skipped, so seeding twice is harmless.

    Returns:
        Number of books added
    """
    added = 0
    for book in SAMPLE_BOOKS:
        if book.id in store:
            logger.debug("Sample book already present", book_id=book.id)
            continue
        store.add(book)
        added += 1

    logger.info("Sample books seeded", added=added, total=store.count())
    return added
