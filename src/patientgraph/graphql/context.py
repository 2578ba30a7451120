"""
Shared helpers for GraphQL resolvers: context access and error mapping
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import strawberry
from sqlalchemy.exc import SQLAlchemyError

from ..errors import InputValidationError, StorageError
from ..logging import get_logger

if TYPE_CHECKING:
    from ..database import Database

logger = get_logger(__name__)


def get_database_from_info(info: strawberry.Info) -> "Database":
    """Extract the injected Database from the GraphQL context."""
    database = info.context.get("database")
    if database is None:
        logger.error("Database not found in GraphQL context")
        raise RuntimeError("Database not available in GraphQL context")
    return database


def require_id(value: int | None, argument: str = "id") -> int:
    """Reject a missing identifier argument instead of defaulting it to 0."""
    if value is None:
        raise InputValidationError(f"Argument '{argument}' is required", argument=argument)
    return value


@contextmanager
def storage_errors(operation: str, **log_context: Any) -> Iterator[None]:
    """Translate SQLAlchemy failures into a StorageError for the GraphQL response."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            "Storage operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            **log_context,
        )
        raise StorageError(f"Storage error during {operation}", operation=operation) from e
