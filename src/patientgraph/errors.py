"""
Typed errors raised by resolvers and the storage layer.

Every error carries a machine readable ``code``. graphql-core copies the
``extensions`` attribute of the original exception onto the GraphQL error it
reports, so clients see ``{"extensions": {"code": ...}}`` next to the message.
"""

from typing import Any


class PatientGraphError(Exception):
    """Base class for errors surfaced to GraphQL clients."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, **self.details}


class InputValidationError(PatientGraphError):
    """An argument was missing or unusable."""

    code = "BAD_USER_INPUT"


class StorageError(PatientGraphError):
    """A database statement failed."""

    code = "STORAGE_ERROR"


class DatabaseUnavailableError(PatientGraphError):
    """The database could not be reached at startup."""

    code = "DATABASE_UNAVAILABLE"
