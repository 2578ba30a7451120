#!/usr/bin/env python3
"""
Main CLI entry point for the patientgraph server.
"""

import os

import click
import uvicorn

from patientgraph import __version__
from patientgraph.database.cli import main as db_cli
from patientgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="patientgraph")
def cli() -> None:
    """patientgraph CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8080, type=int, help="Port to bind to (default: 8080)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the patientgraph API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting patientgraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app factory reads settings from the environment, also under --reload
    os.environ["PATIENTGRAPH_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["PATIENTGRAPH_DEBUG"] = "true"

    uvicorn.run(
        "patientgraph.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


cli.add_command(db_cli, name="db")


if __name__ == "__main__":
    cli()
