"""
Post GraphQL type definitions
"""

from datetime import datetime

import strawberry

from .patient import Patient, format_timestamp


@strawberry.type(description="A Post made by a registered Patient")
class Post:
    """Post type for GraphQL API."""

    id: int = strawberry.field(description="The identifier of the post.")
    title: str = strawberry.field(description="The title of the post.")
    content: str = strawberry.field(description="The content of the post.")
    patient_id: int = strawberry.field(description="The identifier of the posting Patient.")
    created: strawberry.Private[datetime | None] = None

    @strawberry.field(name="created_at", description="The created_at date of the post.")
    def created_at(self) -> str:
        return format_timestamp(self.created)

    @strawberry.field(name="Patient")
    async def patient(self, info: strawberry.Info) -> Patient | None:
        """Look up the owning Patient. Runs once per post (no batching)."""
        from ..resolvers.post import resolve_post_patient

        return await resolve_post_patient(self, info)
