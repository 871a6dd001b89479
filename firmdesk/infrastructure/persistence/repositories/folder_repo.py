"""Folder repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import Folder
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class FolderRepository(BaseRepository[Folder]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Folder)

    async def list_all(self) -> list[Folder]:
        result = await self.db.execute(
            select(Folder).order_by(Folder.created_at.desc(), Folder.id)
        )
        return list(result.scalars().all())

    async def list_by_owner(self, user_id: str) -> list[Folder]:
        result = await self.db.execute(
            select(Folder)
            .where(Folder.created_by_id == user_id)
            .order_by(Folder.created_at.desc(), Folder.id)
        )
        return list(result.scalars().all())
