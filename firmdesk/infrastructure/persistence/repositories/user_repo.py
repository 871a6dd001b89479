"""User repository: lookups by email, role and practice-area links."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.domain.exceptions import DuplicateResourceException
from firmdesk.infrastructure.persistence.models import (
    PracticeArea,
    Role,
    User,
    UserPracticeArea,
)
from firmdesk.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """User repository. Emails are compared case-insensitively."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def create(self, obj: User) -> User:
        """Insert; raise DuplicateResourceException on the email unique constraint."""
        try:
            return await super().create(obj)
        except IntegrityError:
            raise DuplicateResourceException("Email already in use", "email")

    async def update(self, obj: User) -> User:
        try:
            return await super().update(obj)
        except IntegrityError:
            raise DuplicateResourceException("Email already in use", "email")

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        """All users, newest first."""
        result = await self.db.execute(
            select(User).order_by(User.created_at.desc(), User.id)
        )
        return list(result.scalars().all())

    async def get_by_ids(self, user_ids: list[str]) -> list[User]:
        if not user_ids:
            return []
        result = await self.db.execute(
            select(User).where(User.id.in_(user_ids)).order_by(User.name)
        )
        return list(result.scalars().all())

    async def get_role(self, user: User) -> Role | None:
        if user.role_id is None:
            return None
        return await self.db.get(Role, user.role_id)

    async def get_practice_areas(self, user_id: str) -> list[PracticeArea]:
        """Practice areas linked to the user, by name."""
        result = await self.db.execute(
            select(PracticeArea)
            .join(
                UserPracticeArea,
                UserPracticeArea.practice_area_id == PracticeArea.id,
            )
            .where(UserPracticeArea.user_id == user_id)
            .order_by(PracticeArea.name)
        )
        return list(result.scalars().all())

    async def set_practice_areas(
        self, user_id: str, practice_area_ids: list[str]
    ) -> None:
        """Replace the user's practice-area links with practice_area_ids."""
        await self.db.execute(
            delete(UserPracticeArea).where(UserPracticeArea.user_id == user_id)
        )
        for practice_area_id in dict.fromkeys(practice_area_ids):
            self.db.add(
                UserPracticeArea(user_id=user_id, practice_area_id=practice_area_id)
            )
        await self.db.flush()

    async def delete(self, obj: User) -> None:
        """Guarded delete; the user's own practice-area links go with it."""
        await super().delete(obj)
        await self.db.execute(
            delete(UserPracticeArea).where(UserPracticeArea.user_id == obj.id)
        )
