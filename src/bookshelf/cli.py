#!/usr/bin/env python3
"""
Main CLI entry point for Bookshelf backend server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--seed/--no-seed",
    default=True,
    help="Load the sample books at startup (default: seed)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, seed: bool, log_level: str) -> None:
    """Start the Bookshelf API server.

    Books live in process memory, so the server always runs a single worker.
    """

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        seed=seed,
        log_level=log_level,
    )

    # create_app() reads its settings from the environment, here and in reloaded processes
    os.environ["BOOKSHELF_API_HOST"] = host
    os.environ["BOOKSHELF_API_PORT"] = str(port)
    os.environ["BOOKSHELF_SEED_SAMPLE_DATA"] = "true" if seed else "false"
    os.environ["BOOKSHELF_DEBUG"] = "true" if log_level == "debug" else "false"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level

    try:
        if reload:
            # Reload needs an import string so the app is rebuilt in the child process
            uvicorn.run(
                "bookshelf.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import create_app

            app = create_app()

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema_command(output: str | None) -> None:
    """Print the GraphQL schema as SDL."""
    from bookshelf.graphql.schema import export_schema

    sdl = export_schema()

    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(sdl + "\n")
    click.echo(f"✓ Schema written to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
