"""Document repository: listing by case, folder and visibility."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import (
    Case,
    CaseAssignment,
    Document,
    Folder,
)
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class DocumentRepository(BaseRepository[Document]):
    """Documents are listed newest first everywhere."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Document)

    def _newest_first(self, stmt):
        return stmt.order_by(Document.created_at.desc(), Document.id)

    async def list_all(self) -> list[Document]:
        result = await self.db.execute(self._newest_first(select(Document)))
        return list(result.scalars().all())

    async def list_by_case(self, case_id: str) -> list[Document]:
        result = await self.db.execute(
            self._newest_first(select(Document).where(Document.case_id == case_id))
        )
        return list(result.scalars().all())

    async def list_by_folder(self, folder_id: str) -> list[Document]:
        result = await self.db.execute(
            self._newest_first(select(Document).where(Document.folder_id == folder_id))
        )
        return list(result.scalars().all())

    async def list_for_user(self, user_id: str) -> list[Document]:
        """Documents in cases the user created or is assigned to, and in their folders."""
        assigned = select(CaseAssignment.case_id).where(
            CaseAssignment.user_id == user_id
        )
        created = select(Case.id).where(Case.created_by_id == user_id)
        folders = select(Folder.id).where(Folder.created_by_id == user_id)
        result = await self.db.execute(
            self._newest_first(
                select(Document).where(
                    or_(
                        Document.case_id.in_(assigned),
                        Document.case_id.in_(created),
                        Document.folder_id.in_(folders),
                    )
                )
            )
        )
        return list(result.scalars().all())
