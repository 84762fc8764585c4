"""
Tests for sample data seeding
"""

from bookshelf.seed_data import SAMPLE_BOOKS, seed_sample_books


def test_seed_loads_sample_books_in_order(store):
    added = seed_sample_books(store)

    assert added == 2
    assert [book.title for book in store.list_books()] == ["The Awakening", "City of Glass"]


def test_seed_is_idempotent(store):
    seed_sample_books(store)

    assert seed_sample_books(store) == 0
    assert store.count() == len(SAMPLE_BOOKS)


def test_city_of_glass_sample(seeded_store):
    book = seeded_store.get("35b19ead-3aa9-415e-a46d-6621e1604119")

    assert book is not None
    assert book.title == "City of Glass"
    assert book.genre == "FANTASY"
    assert book.publish_year == 2009
    assert book.author_name == "Paul Auster"
    assert book.author_nationality == "Estadounidense"


def test_the_awakening_has_no_isbn_or_nationality(seeded_store):
    book = seeded_store.get("d26fd654-f4d4-4b98-91e5-6d8c9569aed6")

    assert book.isbn is None
    assert book.author_nationality is None
    assert book.genre == "NONE"
