"""
Patient GraphQL type definitions
"""

from datetime import datetime

import strawberry


def format_timestamp(value: datetime | None) -> str:
    """Render a timestamp as ISO-8601, or "" when the entity carries none."""
    if value is None:
        return ""
    return value.isoformat()


@strawberry.type(description="A Patient who wrote the post")
class Patient:
    """Patient type for GraphQL API."""

    id: int = strawberry.field(description="The identifier of the Patient.")
    name: str = strawberry.field(description="The name of the Patient.")
    email: str = strawberry.field(description="The email address of the Patient.")
    created: strawberry.Private[datetime | None] = None

    @strawberry.field(name="created_at", description="The created_at date of the Patient.")
    def created_at(self) -> str:
        return format_timestamp(self.created)
