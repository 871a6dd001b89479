"""User application service: admin user management and the caller's own profile."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from firmdesk.application.dtos.user import PracticeAreaRef, UserProfile
from firmdesk.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from firmdesk.infrastructure.persistence.models import User
from firmdesk.infrastructure.persistence.repositories import (
    PracticeAreaRepository,
    RoleRepository,
    UserRepository,
)
from firmdesk.infrastructure.security.password import (
    DEFAULT_ROUNDS,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """CRUD over users plus update-me. Passwords are hashed off the event loop."""

    def __init__(
        self,
        user_repo: UserRepository,
        role_repo: RoleRepository,
        practice_area_repo: PracticeAreaRepository,
        *,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        self._user_repo = user_repo
        self._role_repo = role_repo
        self._practice_area_repo = practice_area_repo
        self._bcrypt_rounds = bcrypt_rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password, self._bcrypt_rounds)

    async def to_profile(self, user: User) -> UserProfile:
        """Attach role name and practice areas to a user row."""
        role = await self._user_repo.get_role(user)
        areas = await self._user_repo.get_practice_areas(user.id)
        return UserProfile(
            id=user.id,
            email=user.email,
            name=user.name,
            role_id=user.role_id,
            role=role.name if role else None,
            is_active=user.is_active,
            created_at=user.created_at,
            practice_areas=[PracticeAreaRef(id=pa.id, name=pa.name) for pa in areas],
        )

    async def _require_user(self, user_id: str) -> User:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def _ensure_email_free(self, email: str, exclude_id: str | None = None) -> None:
        existing = await self._user_repo.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateResourceException("Email already in use", "email")

    async def _validate_role(self, role_id: str | None) -> None:
        if role_id is not None and await self._role_repo.get_by_id(role_id) is None:
            raise ValidationException("Role not found", field="roleId")

    async def _validate_practice_areas(self, practice_area_ids: list[str]) -> None:
        missing = await self._practice_area_repo.missing_ids(practice_area_ids)
        if missing:
            raise ValidationException(
                f"Practice area not found: {', '.join(missing)}",
                field="practiceAreaIds",
            )

    async def list_users(self) -> list[UserProfile]:
        users = await self._user_repo.list_all()
        return [await self.to_profile(u) for u in users]

    async def get_user(self, user_id: str) -> UserProfile:
        return await self.to_profile(await self._require_user(user_id))

    async def create_user(
        self,
        email: str,
        password: str,
        name: str,
        role_id: str | None = None,
        is_active: bool = True,
        practice_area_ids: list[str] | None = None,
    ) -> UserProfile:
        email = normalize_email(email)
        await self._ensure_email_free(email)
        await self._validate_role(role_id)
        await self._validate_practice_areas(practice_area_ids or [])
        user = await self._user_repo.create(
            User(
                email=email,
                hashed_password=await self.hash(password),
                name=name,
                role_id=role_id,
                is_active=is_active,
            )
        )
        if practice_area_ids:
            await self._user_repo.set_practice_areas(user.id, practice_area_ids)
        logger.info("Created user %s", user.id)
        return await self.to_profile(user)

    async def update_user(self, user_id: str, changes: dict[str, Any]) -> UserProfile:
        """Partial update; only keys present in changes are applied."""
        user = await self._require_user(user_id)
        if "email" in changes and changes["email"] is not None:
            email = normalize_email(changes["email"])
            await self._ensure_email_free(email, exclude_id=user.id)
            user.email = email
        if "name" in changes and changes["name"] is not None:
            user.name = changes["name"]
        if "role_id" in changes:
            await self._validate_role(changes["role_id"])
            user.role_id = changes["role_id"]
        if "is_active" in changes and changes["is_active"] is not None:
            user.is_active = changes["is_active"]
        if changes.get("password"):
            user.hashed_password = await self.hash(changes["password"])
        if "practice_area_ids" in changes and changes["practice_area_ids"] is not None:
            await self._validate_practice_areas(changes["practice_area_ids"])
            await self._user_repo.set_practice_areas(
                user.id, changes["practice_area_ids"]
            )
        user = await self._user_repo.update(user)
        return await self.to_profile(user)

    async def delete_user(self, user_id: str) -> None:
        """Guarded delete; 409 while the user still has cases, assignments or uploads."""
        user = await self._require_user(user_id)
        await self._user_repo.delete(user)
        logger.info("Deleted user %s", user_id)

    async def update_me(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        current_password: str | None = None,
    ) -> UserProfile:
        """Update the caller's own name, email or password.

        A new password is accepted only with a current_password that verifies.
        """
        user = await self._require_user(user_id)
        if password is not None:
            ok = current_password is not None and await asyncio.to_thread(
                verify_password, current_password, user.hashed_password
            )
            if not ok:
                raise ValidationException(
                    "Current password is incorrect", field="currentPassword"
                )
            user.hashed_password = await self.hash(password)
        if email is not None:
            email = normalize_email(email)
            await self._ensure_email_free(email, exclude_id=user.id)
            user.email = email
        if name is not None:
            user.name = name
        user = await self._user_repo.update(user)
        return await self.to_profile(user)
