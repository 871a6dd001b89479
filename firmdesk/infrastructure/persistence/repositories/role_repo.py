"""Role repository."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.domain.exceptions import DuplicateResourceException
from firmdesk.infrastructure.persistence.models import Role
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def create(self, obj: Role) -> Role:
        """Insert; a concurrent insert of the same name becomes a 409."""
        name = obj.name
        try:
            return await super().create(obj)
        except IntegrityError:
            raise DuplicateResourceException(f"Role '{name}' already exists", "name")

    async def update(self, obj: Role) -> Role:
        name = obj.name
        try:
            return await super().update(obj)
        except IntegrityError:
            raise DuplicateResourceException(f"Role '{name}' already exists", "name")

    async def get_by_name(self, name: str) -> Role | None:
        result = await self.db.execute(
            select(Role).where(func.lower(Role.name) == name.strip().lower())
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Role]:
        result = await self.db.execute(select(Role).order_by(Role.name))
        return list(result.scalars().all())
