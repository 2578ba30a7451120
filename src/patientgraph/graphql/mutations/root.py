"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.patient import Patient
from ..types.post import Post

# createPost and updatePost both take the owner under this argument name
PatientIdArgument = Annotated[int, strawberry.argument(name="Patient_id")]


@strawberry.type(name="RootMutation")
class Mutation:
    """Root GraphQL mutation type."""

    # Patient mutations
    @strawberry.mutation(name="createPatient", description="Create new Patient")
    async def create_patient(self, info: strawberry.Info, name: str, email: str) -> Patient | None:
        from ..resolvers.patient import create_patient

        return await create_patient(info, name, email)

    @strawberry.mutation(name="updatePatient", description="Update an Patient")
    async def update_patient(
        self, info: strawberry.Info, id: int, name: str, email: str
    ) -> Patient | None:
        from ..resolvers.patient import update_patient

        return await update_patient(info, id, name, email)

    @strawberry.mutation(name="deletePatient", description="Delete an Patient")
    async def delete_patient(self, info: strawberry.Info, id: int | None = None) -> Patient | None:
        from ..resolvers.patient import delete_patient

        return await delete_patient(info, id)

    # Post mutations
    @strawberry.mutation(name="createPost", description="Create new post")
    async def create_post(
        self, info: strawberry.Info, title: str, content: str, patient_id: PatientIdArgument
    ) -> Post | None:
        from ..resolvers.post import create_post

        return await create_post(info, title, content, patient_id)

    @strawberry.mutation(name="updatePost", description="Update a post")
    async def update_post(
        self,
        info: strawberry.Info,
        id: int,
        title: str,
        content: str,
        patient_id: PatientIdArgument,
    ) -> Post | None:
        from ..resolvers.post import update_post

        return await update_post(info, id, title, content, patient_id)

    @strawberry.mutation(name="deletePost", description="Delete a post")
    async def delete_post(self, info: strawberry.Info, id: int | None = None) -> Post | None:
        from ..resolvers.post import delete_post

        return await delete_post(info, id)
