"""PracticeArea repository."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.domain.exceptions import DuplicateResourceException
from firmdesk.infrastructure.persistence.models import PracticeArea
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class PracticeAreaRepository(BaseRepository[PracticeArea]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PracticeArea)

    async def create(self, obj: PracticeArea) -> PracticeArea:
        """Insert; a concurrent insert of the same name becomes a 409."""
        name = obj.name
        try:
            return await super().create(obj)
        except IntegrityError:
            raise DuplicateResourceException(
                f"Practice area '{name}' already exists", "name"
            )

    async def update(self, obj: PracticeArea) -> PracticeArea:
        name = obj.name
        try:
            return await super().update(obj)
        except IntegrityError:
            raise DuplicateResourceException(
                f"Practice area '{name}' already exists", "name"
            )

    async def get_by_name(self, name: str) -> PracticeArea | None:
        result = await self.db.execute(
            select(PracticeArea).where(
                func.lower(PracticeArea.name) == name.strip().lower()
            )
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[PracticeArea]:
        result = await self.db.execute(select(PracticeArea).order_by(PracticeArea.name))
        return list(result.scalars().all())

    async def missing_ids(self, practice_area_ids: list[str]) -> list[str]:
        """Return the ids in practice_area_ids that have no row."""
        if not practice_area_ids:
            return []
        result = await self.db.execute(
            select(PracticeArea.id).where(PracticeArea.id.in_(practice_area_ids))
        )
        found = set(result.scalars().all())
        return [pid for pid in practice_area_ids if pid not in found]
