"""
Post resolvers for GraphQL API
"""

from __future__ import annotations

from datetime import UTC, datetime

import strawberry

from ... import repository
from ...dbmodels import Posts
from ...logging import get_logger
from ..context import get_database_from_info, require_id, storage_errors
from ..types.patient import Patient
from ..types.post import Post
from .patient import patient_from_row

logger = get_logger(__name__)


def post_from_row(row: Posts) -> Post:
    """Convert a SQLAlchemy row to the GraphQL type."""
    return Post(
        id=row.id,
        title=row.title,
        content=row.content,
        patient_id=row.patient_id,
        created=row.created_at,
    )


# Query resolvers
async def resolve_post_by_id(info: strawberry.Info, id: int | None) -> Post | None:
    """Resolve a single post; returns None when no row matches."""
    post_id = require_id(id)
    database = get_database_from_info(info)

    with storage_errors("get_post", post_id=post_id):
        async with database.session() as session:
            row = await repository.get_post(session, post_id)
            if row is None:
                logger.info("Post not found", post_id=post_id)
                return None
            return post_from_row(row)


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    database = get_database_from_info(info)

    with storage_errors("list_posts"):
        async with database.session() as session:
            rows = await repository.list_posts(session)
            return [post_from_row(row) for row in rows]


# Field resolvers
async def resolve_post_patient(post: Post, info: strawberry.Info) -> Patient | None:
    """
    Resolve the Patient that owns a post.

    Issues one lookup per post. Listing N posts with this field selected
    costs 1 + N statements.
    """
    database = get_database_from_info(info)

    with storage_errors("get_post_patient", post_id=post.id, patient_id=post.patient_id):
        async with database.session() as session:
            row = await repository.get_patient(session, post.patient_id)
            if row is None:
                logger.warning(
                    "Post references missing patient", post_id=post.id, patient_id=post.patient_id
                )
                return None
            return patient_from_row(row)


# Mutation resolvers
async def create_post(info: strawberry.Info, title: str, content: str, patient_id: int) -> Post:
    """Insert a post; created_at is stamped here, not by the database."""
    database = get_database_from_info(info)
    created_at = datetime.now(UTC)

    with storage_errors("create_post", patient_id=patient_id):
        async with database.session() as session:
            new_id = await repository.insert_post(
                session,
                title=title,
                content=content,
                patient_id=patient_id,
                created_at=created_at,
            )

    logger.info("Post created", post_id=new_id, patient_id=patient_id)
    return Post(
        id=new_id, title=title, content=content, patient_id=patient_id, created=created_at
    )


async def update_post(
    info: strawberry.Info, id: int, title: str, content: str, patient_id: int
) -> Post:
    """Update a post. The result is rebuilt from the arguments, created_at stays unset."""
    database = get_database_from_info(info)

    with storage_errors("update_post", post_id=id):
        async with database.session() as session:
            matched = await repository.update_post(
                session, id, title=title, content=content, patient_id=patient_id
            )

    if matched == 0:
        logger.warning("Update matched no post", post_id=id, rowcount=matched)
    else:
        logger.info("Post updated", post_id=id)
    return Post(id=id, title=title, content=content, patient_id=patient_id)


async def delete_post(info: strawberry.Info, id: int | None) -> None:
    """Delete a post. Deleting a missing id is a no-op."""
    post_id = require_id(id)
    database = get_database_from_info(info)

    with storage_errors("delete_post", post_id=post_id):
        async with database.session() as session:
            deleted = await repository.delete_post(session, post_id)

    logger.info("Post delete executed", post_id=post_id, rowcount=deleted)
    return None
