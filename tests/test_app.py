"""
Tests for application construction
"""

import logging

from fastapi.testclient import TestClient

from bookshelf import __version__
from bookshelf.api.app import create_app
from bookshelf.config import Settings
from bookshelf.store import BookStore


def test_create_app_seeds_store_by_default():
    app = create_app(Settings(seed_sample_data=True, debug=False))

    assert app.state.book_store.count() == 2


def test_create_app_without_seed():
    app = create_app(Settings(seed_sample_data=False, debug=False))

    assert app.state.book_store.count() == 0


def test_create_app_uses_given_store():
    store = BookStore()
    app = create_app(Settings(seed_sample_data=True, debug=False), store=store)

    assert app.state.book_store is store
    assert store.count() == 0


def test_apps_do_not_share_stores():
    first = create_app(Settings(seed_sample_data=True, debug=False))
    second = create_app(Settings(seed_sample_data=True, debug=False))

    with TestClient(first) as client:
        client.post(
            "/graphql",
            json={"query": 'mutation { deleteBook(id: "35b19ead-3aa9-415e-a46d-6621e1604119") { id } }'},
        )

    assert first.state.book_store.count() == 1
    assert second.state.book_store.count() == 2


def test_health_reports_version(client):
    response = client.get("/health")

    assert response.json() == {"status": "healthy", "version": __version__}


def test_graphiql_disabled(client):
    response = client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 404


def test_graphiql_enabled():
    app = create_app(Settings(seed_sample_data=False, debug=False, graphiql=True))

    with TestClient(app) as client:
        response = client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_create_app_applies_log_level():
    create_app(Settings(seed_sample_data=False, debug=False, log_level="warning"))

    assert logging.getLogger().level == logging.WARNING


def test_create_app_debug_logs_everything():
    create_app(Settings(seed_sample_data=False, debug=True, log_level="warning"))

    assert logging.getLogger().level == logging.DEBUG
