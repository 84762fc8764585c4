"""
Main FastAPI application for Bookshelf backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..seed_data import seed_sample_books
from ..store import BookStore

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, store: BookStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (read from the environment when None)
        store: Book store to serve (a new, optionally seeded store if None)
    """
    settings = settings or Settings()
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    if store is None:
        store = BookStore()
        if settings.seed_sample_data:
            seed_sample_books(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Bookshelf API...", books=app.state.book_store.count())
        logger.info(
            "Server ready",
            url=f"http://{settings.api_host}:{settings.api_port}/graphql",
        )

        yield

        logger.info("Shutting down Bookshelf API...")

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over an in-memory collection of books",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.book_store = store

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Validate schema at startup so a broken schema fails fast
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server must not start with a broken GraphQL endpoint
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    _settings = Settings()
    uvicorn.run(
        "bookshelf.api.app:create_app",
        factory=True,
        host=_settings.api_host,
        port=_settings.api_port,
        reload=_settings.api_reload,
        log_level=_settings.log_level.lower(),
    )
