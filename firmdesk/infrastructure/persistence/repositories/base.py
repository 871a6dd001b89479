"""Base repository: lookup by id, create, update and guarded delete."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import object_session

from firmdesk.domain.exceptions import ResourceNotFoundException
from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.integrity_guard import ensure_deletable


def dialect_insert(db: AsyncSession, model: type[Base]):
    """INSERT for the bound dialect, so callers can use on_conflict_do_nothing."""
    if db.get_bind().dialect.name == "postgresql":
        return pg_insert(model)
    return sqlite_insert(model)


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """CRUD on one model, always on the caller's session.

    Nothing here commits: the request's transaction (get_db_transactional)
    decides. delete() locks the row and runs _on_before_delete (the
    integrity guard by default) before removing it, so a guard check and the
    delete it protects commit or roll back together.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Insert obj and reload server defaults (created_at, flags)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on obj and reload it.

        An object loaded by another session is merged in, provided its row
        still exists; otherwise ResourceNotFoundException.
        """
        if object_session(obj) is not self.db.sync_session:
            entity_id = getattr(obj, "id", None)
            if entity_id is None or await self.get_by_id(entity_id) is None:
                raise ResourceNotFoundException(self.model.__name__, str(entity_id))
            obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Lock the row, run _on_before_delete, then delete the record."""
        model: Any = self.model
        await self.db.execute(
            select(model.id).where(model.id == obj.id).with_for_update()
        )
        await self._on_before_delete(obj)
        await self.db.delete(obj)
        await self.db.flush()

    async def _on_before_delete(self, obj: ModelType) -> None:
        """Refuse the delete while guarded dependents exist."""
        await ensure_deletable(self.db, obj)
