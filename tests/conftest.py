"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from strawberry.types import ExecutionResult

from patientgraph.database import Database
from patientgraph.graphql.schema import schema

SQL_VERBS = ("SELECT", "INSERT", "UPDATE", "DELETE")

Execute = Callable[..., Awaitable[ExecutionResult]]


def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'patientgraph.db'}"


@pytest_asyncio.fixture(scope="function")
async def empty_database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """A Database over a fresh SQLite file with no tables."""
    database = Database(create_async_engine(sqlite_url(tmp_path)))
    yield database
    await database.dispose()


@pytest_asyncio.fixture(scope="function")
async def database(empty_database: Database) -> Database:
    """A Database with the patient and posts tables created."""
    await empty_database.create_tables()
    return empty_database


@pytest.fixture(scope="function")
def statement_log(database: Database) -> Generator[list[str], None, None]:
    """Record every data statement sent to the database."""
    statements: list[str] = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        _ = conn, cursor, parameters, context, executemany
        if statement.lstrip().upper().startswith(SQL_VERBS):
            statements.append(statement)

    sync_engine = database.engine.sync_engine
    event.listen(sync_engine, "before_cursor_execute", before_cursor_execute)
    yield statements
    event.remove(sync_engine, "before_cursor_execute", before_cursor_execute)


def make_execute(database: Database) -> Execute:
    async def execute(query: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        return await schema.execute(
            query, variable_values=variables, context_value={"database": database}
        )

    return execute


@pytest.fixture(scope="function")
def execute(database: Database) -> Execute:
    """Run a GraphQL document against the schema with the test database injected."""
    return make_execute(database)


@pytest.fixture(scope="function")
def execute_without_tables(empty_database: Database) -> Execute:
    """Run a GraphQL document against a database that has no tables."""
    return make_execute(empty_database)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
