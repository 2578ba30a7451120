"""
CLI commands for patientgraph database migrations.
"""

import asyncio
import sys
from pathlib import Path

import click
from alembic import command
from alembic.config import Config

from ..logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Get Alembic configuration from the project root."""
    project_dir = Path(__file__).resolve().parents[3]
    alembic_ini = project_dir / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(project_dir / "alembic"))
    return config


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def main(log_level: str) -> None:
    """patientgraph database management."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    try:
        config = get_alembic_config()
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    try:
        config = get_alembic_config()
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


@main.command("create-tables")
@click.option("--database-url", default=None, help="Override the configured database URL")
def create_tables(database_url: str | None) -> None:
    """Create the patient and posts tables directly from the ORM models."""
    from .connection import create_database

    async def do_create() -> None:
        database = create_database(database_url)
        try:
            await database.create_tables()
        finally:
            await database.dispose()

    try:
        asyncio.run(do_create())
        logger.info("Tables created")
        click.echo("✓ Tables created")
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
