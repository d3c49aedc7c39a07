#!/usr/bin/env python3
"""
Main CLI entry point for the staffdesk backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from staffdesk import __version__
from staffdesk.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="staffdesk")
def cli() -> None:
    """staffdesk CLI - run the API server and manage the database."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (default: STAFFDESK_API_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: STAFFDESK_API_PORT)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload for development (default: STAFFDESK_API_RELOAD)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool | None, log_level: str) -> None:
    """Start the staffdesk API server."""
    from staffdesk.config import Settings

    config = Settings()
    host = host or config.api_host
    port = port if port is not None else config.api_port
    reload = config.api_reload if reload is None else reload

    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting staffdesk API server", host=host, port=port, reload=reload)

    # The app factory reads settings from the environment, including in reload workers
    os.environ["STAFFDESK_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["STAFFDESK_DEBUG"] = "true"

    try:
        uvicorn.run(
            "staffdesk.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option(
    "--database-url",
    default=None,
    help="Database URL (defaults to STAFFDESK_DATABASE_URL)",
)
def init_db(database_url: str | None) -> None:
    """Create the users and employees tables if they do not exist."""
    from staffdesk.config import settings
    from staffdesk.database.connection import create_engine, create_schema

    configure_logging(debug=settings.debug)

    async def do_init():
        engine = create_engine(database_url or settings.database_url, echo=settings.sql_echo)
        try:
            await create_schema(engine)
        finally:
            await engine.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database schema created")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
