"""
Root GraphQL query definitions
"""

import strawberry

from ..types.patient import Patient
from ..types.post import Post


@strawberry.type(name="RootQuery")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="Patient", description="Get a Patient.")
    async def patient(self, info: strawberry.Info, id: int | None = None) -> Patient | None:
        from ..resolvers.patient import resolve_patient_by_id

        return await resolve_patient_by_id(info, id)

    @strawberry.field(name="Patients", description="List of Patients.")
    async def patients(self, info: strawberry.Info) -> list[Patient] | None:
        from ..resolvers.patient import resolve_patients

        return await resolve_patients(info)

    @strawberry.field(description="Get a patient's post.")
    async def post(self, info: strawberry.Info, id: int | None = None) -> Post | None:
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(info, id)

    @strawberry.field(description="List of posts.")
    async def posts(self, info: strawberry.Info) -> list[Post] | None:
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info)
