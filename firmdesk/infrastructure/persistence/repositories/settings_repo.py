"""FirmSettings repository (singleton row)."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import FirmSettings
from firmdesk.infrastructure.persistence.models.firm_settings import SINGLETON_KEY
from firmdesk.infrastructure.persistence.repositories.base import (
    BaseRepository,
    dialect_insert,
)
from firmdesk.shared.utils.generators import generate_cuid


class SettingsRepository(BaseRepository[FirmSettings]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, FirmSettings)

    async def get_current(self) -> FirmSettings | None:
        result = await self.db.execute(
            select(FirmSettings).where(FirmSettings.singleton_key == SINGLETON_KEY)
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, **values: Any) -> tuple[FirmSettings, bool]:
        """Insert the row from values unless it exists; return (row, created).

        Concurrent first writers collide on the singleton_key unique index:
        the losing INSERT does nothing and the row it reads is the winner's.
        """
        stmt = (
            dialect_insert(self.db, FirmSettings)
            .values(id=generate_cuid(), singleton_key=SINGLETON_KEY, **values)
            .on_conflict_do_nothing(index_elements=["singleton_key"])
            .returning(FirmSettings.id)
        )
        inserted = (await self.db.execute(stmt)).scalar_one_or_none()
        current = await self.get_current()
        assert current is not None
        return current, inserted is not None
