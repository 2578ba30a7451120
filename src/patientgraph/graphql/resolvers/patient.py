"""
Patient resolvers for GraphQL API
"""

from __future__ import annotations

from datetime import UTC, datetime

import strawberry

from ... import repository
from ...dbmodels import Patients
from ...logging import get_logger
from ..context import get_database_from_info, require_id, storage_errors
from ..types.patient import Patient

logger = get_logger(__name__)


def patient_from_row(row: Patients) -> Patient:
    """Convert a SQLAlchemy row to the GraphQL type."""
    return Patient(id=row.id, name=row.name, email=row.email, created=row.created_at)


# Query resolvers
async def resolve_patient_by_id(info: strawberry.Info, id: int | None) -> Patient | None:
    """Resolve a single patient; returns None when no row matches."""
    patient_id = require_id(id)
    database = get_database_from_info(info)

    with storage_errors("get_patient", patient_id=patient_id):
        async with database.session() as session:
            row = await repository.get_patient(session, patient_id)
            if row is None:
                logger.info("Patient not found", patient_id=patient_id)
                return None
            return patient_from_row(row)


async def resolve_patients(info: strawberry.Info) -> list[Patient]:
    database = get_database_from_info(info)

    with storage_errors("list_patients"):
        async with database.session() as session:
            rows = await repository.list_patients(session)
            return [patient_from_row(row) for row in rows]


# Mutation resolvers
async def create_patient(info: strawberry.Info, name: str, email: str) -> Patient:
    """Insert a patient; created_at is stamped here, not by the database."""
    database = get_database_from_info(info)
    created_at = datetime.now(UTC)

    with storage_errors("create_patient"):
        async with database.session() as session:
            new_id = await repository.insert_patient(
                session, name=name, email=email, created_at=created_at
            )

    logger.info("Patient created", patient_id=new_id)
    return Patient(id=new_id, name=name, email=email, created=created_at)


async def update_patient(info: strawberry.Info, id: int, name: str, email: str) -> Patient:
    """
    Update a patient's name and email.

    The result is rebuilt from the arguments, not re-read, so created_at is
    left unset.
    """
    database = get_database_from_info(info)

    with storage_errors("update_patient", patient_id=id):
        async with database.session() as session:
            matched = await repository.update_patient(session, id, name=name, email=email)

    if matched == 0:
        logger.warning("Update matched no patient", patient_id=id, rowcount=matched)
    else:
        logger.info("Patient updated", patient_id=id)
    return Patient(id=id, name=name, email=email)


async def delete_patient(info: strawberry.Info, id: int | None) -> None:
    """Delete a patient. Deleting a missing id is a no-op."""
    patient_id = require_id(id)
    database = get_database_from_info(info)

    with storage_errors("delete_patient", patient_id=patient_id):
        async with database.session() as session:
            deleted = await repository.delete_patient(session, patient_id)

    logger.info("Patient delete executed", patient_id=patient_id, rowcount=deleted)
    return None
