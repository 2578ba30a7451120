"""Repository helpers: one SQL statement per function."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .dbmodels import Patients, Posts


# Patients
async def get_patient(session: AsyncSession, patient_id: int) -> Patients | None:
    stmt = select(Patients).where(Patients.id == patient_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def list_patients(session: AsyncSession) -> Sequence[Patients]:
    res = await session.execute(select(Patients))
    return res.scalars().all()


async def insert_patient(
    session: AsyncSession, *, name: str, email: str, created_at: datetime
) -> int:
    stmt = (
        insert(Patients)
        .values(name=name, email=email, created_at=created_at)
        .returning(Patients.id)
    )
    res = await session.execute(stmt)
    return res.scalar_one()


async def update_patient(session: AsyncSession, patient_id: int, *, name: str, email: str) -> int:
    """Update name and email; returns the number of rows matched."""
    stmt = (
        update(Patients)
        .where(Patients.id == patient_id)
        .values(name=name, email=email)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


async def delete_patient(session: AsyncSession, patient_id: int) -> int:
    stmt = (
        delete(Patients)
        .where(Patients.id == patient_id)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


# Posts
async def get_post(session: AsyncSession, post_id: int) -> Posts | None:
    stmt = select(Posts).where(Posts.id == post_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def list_posts(session: AsyncSession) -> Sequence[Posts]:
    res = await session.execute(select(Posts))
    return res.scalars().all()


async def insert_post(
    session: AsyncSession,
    *,
    title: str,
    content: str,
    patient_id: int,
    created_at: datetime,
) -> int:
    stmt = (
        insert(Posts)
        .values(title=title, content=content, patient_id=patient_id, created_at=created_at)
        .returning(Posts.id)
    )
    res = await session.execute(stmt)
    return res.scalar_one()


async def update_post(
    session: AsyncSession,
    post_id: int,
    *,
    title: str,
    content: str,
    patient_id: int,
) -> int:
    """Update title, content and owner; returns the number of rows matched."""
    stmt = (
        update(Posts)
        .where(Posts.id == post_id)
        .values(title=title, content=content, patient_id=patient_id)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


async def delete_post(session: AsyncSession, post_id: int) -> int:
    stmt = delete(Posts).where(Posts.id == post_id).execution_options(synchronize_session=False)
    res = await session.execute(stmt)
    return res.rowcount
