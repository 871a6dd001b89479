"""Referential-integrity guard for deletes.

Deleting a user, case, role, practice area or folder is refused while
dependent rows exist; cleanup order is left to the caller instead of
cascading. Checks are declared per model and run in table order; the first
hit raises IntegrityConflictException (409). Callers lock the parent row
first (see BaseRepository.delete) so the checks and the DELETE see the same
state inside one transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.domain.exceptions import IntegrityConflictException
from firmdesk.infrastructure.persistence.models import (
    Case,
    CaseAssignment,
    Document,
    Folder,
    PracticeArea,
    Role,
    User,
    UserPracticeArea,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependentCheck:
    """Refuse the delete while any `dependent` row has `column == parent.id`."""

    dependent: type[Any]
    column: str
    message: str


GUARDS: dict[type[Any], tuple[DependentCheck, ...]] = {
    User: (
        DependentCheck(
            Case,
            "created_by_id",
            "Cannot delete user with existing cases. "
            "Please reassign or delete cases first.",
        ),
        DependentCheck(
            CaseAssignment,
            "user_id",
            "Cannot delete user with case assignments. "
            "Please remove case assignments first.",
        ),
        DependentCheck(
            Document,
            "uploaded_by_id",
            "Cannot delete user who has uploaded documents. "
            "Please reassign or delete documents first.",
        ),
        DependentCheck(
            Folder,
            "created_by_id",
            "Cannot delete user who owns folders. Please delete folders first.",
        ),
    ),
    Case: (
        DependentCheck(
            Document,
            "case_id",
            "Cannot delete case with existing documents. "
            "Please delete documents first.",
        ),
        DependentCheck(
            CaseAssignment,
            "case_id",
            "Cannot delete case with existing assignments. "
            "Please remove assignments first.",
        ),
    ),
    Role: (
        DependentCheck(
            User,
            "role_id",
            "Cannot delete role assigned to users. Please reassign users first.",
        ),
    ),
    PracticeArea: (
        DependentCheck(
            Case,
            "practice_area_id",
            "Cannot delete practice area assigned to cases. "
            "Please reassign cases first.",
        ),
        DependentCheck(
            UserPracticeArea,
            "practice_area_id",
            "Cannot delete practice area assigned to users. "
            "Please remove user assignments first.",
        ),
    ),
    Folder: (
        DependentCheck(
            Document,
            "folder_id",
            "Cannot delete folder with existing documents. "
            "Please delete or move documents first.",
        ),
    ),
}


async def ensure_deletable(db: AsyncSession, obj: Any) -> None:
    """Raise IntegrityConflictException if a guarded dependent of obj exists.

    Models without an entry in GUARDS (documents, assignments) pass.
    """
    model = type(obj)
    for check in GUARDS.get(model, ()):
        column = getattr(check.dependent, check.column)
        found = await db.scalar(select(exists().where(column == obj.id)))
        if found:
            logger.info(
                "Delete of %s %s blocked by %s.%s",
                model.__tablename__,
                obj.id,
                check.dependent.__tablename__,
                check.column,
            )
            raise IntegrityConflictException(
                check.message, model.__tablename__, obj.id
            )
