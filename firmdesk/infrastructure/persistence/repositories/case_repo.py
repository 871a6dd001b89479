"""Case and CaseAssignment repository."""

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import Case, CaseAssignment
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class CaseRepository(BaseRepository[Case]):
    """Cases plus their assignment rows."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Case)

    async def list_all(self) -> list[Case]:
        result = await self.db.execute(
            select(Case).order_by(Case.created_at.desc(), Case.id)
        )
        return list(result.scalars().all())

    async def list_visible_to(self, user_id: str) -> list[Case]:
        """Cases the user created or is assigned to, newest first."""
        assigned = select(CaseAssignment.case_id).where(
            CaseAssignment.user_id == user_id
        )
        result = await self.db.execute(
            select(Case)
            .where(or_(Case.created_by_id == user_id, Case.id.in_(assigned)))
            .order_by(Case.created_at.desc(), Case.id)
        )
        return list(result.scalars().all())

    async def is_assigned(self, case_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(CaseAssignment.id)
            .where(CaseAssignment.case_id == case_id, CaseAssignment.user_id == user_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def assign(self, case_id: str, user_id: str) -> CaseAssignment:
        assignment = CaseAssignment(case_id=case_id, user_id=user_id)
        self.db.add(assignment)
        await self.db.flush()
        await self.db.refresh(assignment)
        return assignment

    async def unassign(self, case_id: str, user_id: str) -> int:
        """Remove every assignment of user_id to case_id; return rows removed."""
        result = await self.db.execute(
            delete(CaseAssignment).where(
                CaseAssignment.case_id == case_id, CaseAssignment.user_id == user_id
            )
        )
        return result.rowcount or 0

    async def list_assignments(self, case_id: str) -> list[CaseAssignment]:
        result = await self.db.execute(
            select(CaseAssignment)
            .where(CaseAssignment.case_id == case_id)
            .order_by(CaseAssignment.assigned_at, CaseAssignment.id)
        )
        return list(result.scalars().all())

    async def assigned_user_ids(self, case_id: str) -> list[str]:
        result = await self.db.execute(
            select(CaseAssignment.user_id)
            .where(CaseAssignment.case_id == case_id)
            .distinct()
        )
        return list(result.scalars().all())
