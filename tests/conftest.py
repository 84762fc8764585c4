"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.config import Settings
from bookshelf.seed_data import seed_sample_books
from bookshelf.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """An empty book store."""
    return BookStore()


@pytest.fixture
def seeded_store() -> BookStore:
    """A store holding the two sample books."""
    store = BookStore()
    seed_sample_books(store)
    return store


@pytest.fixture
def mock_info(seeded_store: BookStore):
    """Create a mock GraphQL info object whose context carries the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": seeded_store}
    return info


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an app that does not seed its own store."""
    return Settings(seed_sample_data=False, debug=False, graphiql=False)


@pytest.fixture
def app(test_settings: Settings, seeded_store: BookStore) -> FastAPI:
    return create_app(test_settings, store=seeded_store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client
