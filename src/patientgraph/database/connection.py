"""
Database connection management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import Settings, settings
from ..logging import get_logger

logger = get_logger(__name__)


def to_async_url(database_url: str) -> str:
    """Rewrite a plain PostgreSQL URL to use the asyncpg driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


class Database:
    """Storage handle shared by all requests.

    Wraps one async engine (and therefore one connection pool). Resolvers
    receive it through the GraphQL context rather than a module global, so
    tests can hand in their own engine.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_local = async_sessionmaker(
            engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session that commits on success and rolls back on error."""
        async with self._session_local() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> tuple[bool, str | None]:
        """
        Test the database connection and return helpful error messages.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True, None
        except Exception as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "password authentication failed" in error_str:
                return False, (
                    f"Database authentication failed: {error_str}\n"
                    f"Please check your database credentials."
                )
            elif "does not exist" in error_str:
                db_name = self.engine.url.database
                return False, (
                    f"Cannot connect to database: {error_str}\n"
                    f"Check that the database '{db_name}' and its user exist."
                )
            elif "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to database server: {error_str}\n"
                    f"The database server appears to be down or unreachable."
                )
            else:
                return False, f"Database connection error ({error_type}): {error_str}"

    async def create_tables(self) -> None:
        """Create all tables from the ORM metadata (development and tests)."""
        from ..dbmodels import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_database(database_url: str | None = None, config: Settings | None = None) -> Database:
    """Build a Database from a URL, falling back to settings."""
    config = config or settings
    url = to_async_url(database_url or config.database_url)

    engine_kwargs: dict = {"echo": config.sql_echo}
    if not url.startswith("sqlite"):
        engine_kwargs["pool_size"] = config.database_pool_size
        engine_kwargs["max_overflow"] = config.database_max_overflow

    engine = create_async_engine(url, **engine_kwargs)
    logger.info("Database engine created", database_url=engine.url.render_as_string())
    return Database(engine)
