"""
Main FastAPI application for patientgraph
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..database import Database, create_database
from ..errors import DatabaseUnavailableError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting patientgraph API...")
    database: Database = app.state.database

    # Fail fast: never serve without a reachable database
    ok, error_message = await database.check_connection()
    if not ok:
        logger.error("Database connection check failed", error=error_message)
        await database.dispose()
        raise DatabaseUnavailableError(error_message or "Database unavailable")
    logger.info("Database connection verified")

    yield

    logger.info("Shutting down patientgraph API...")
    await database.dispose()


def create_app(database: Database | None = None, config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Storage handle to serve from; built from settings when omitted.
        config: Settings override, mainly for tests.
    """
    config = config or settings
    configure_logging(debug=config.debug, log_level=config.log_level)

    app = FastAPI(
        title="patientgraph API",
        description="GraphQL API for patients and their posts",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.database = database or create_database(config=config)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=config.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "patientgraph.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
