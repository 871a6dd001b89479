"""Role and practice-area administration (name-unique lookup tables)."""

from __future__ import annotations

import logging
from typing import Any

from firmdesk.domain.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)
from firmdesk.infrastructure.persistence.models import PracticeArea, Role
from firmdesk.infrastructure.persistence.repositories import (
    PracticeAreaRepository,
    RoleRepository,
)

logger = logging.getLogger(__name__)


class _NamedEntityService:
    """Shared CRUD for tables keyed by a unique, case-insensitive name."""

    resource_type = ""
    model: type[Any]

    def __init__(self, repo: RoleRepository | PracticeAreaRepository) -> None:
        self._repo = repo

    async def _ensure_name_free(self, name: str, exclude_id: str | None = None) -> None:
        existing = await self._repo.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            label = self.resource_type.replace("_", " ").capitalize()
            raise DuplicateResourceException(
                f"{label} '{name}' already exists", "name"
            )

    async def list_all(self) -> list[Any]:
        return await self._repo.list_all()

    async def get(self, entity_id: str) -> Any:
        entity = await self._repo.get_by_id(entity_id)
        if entity is None:
            raise ResourceNotFoundException(
                self.resource_type.replace("_", " "), entity_id
            )
        return entity

    async def create(self, name: str, description: str | None = None) -> Any:
        name = name.strip()
        await self._ensure_name_free(name)
        entity = await self._repo.create(self.model(name=name, description=description))
        logger.info("Created %s %s", self.resource_type, entity.id)
        return entity

    async def update(self, entity_id: str, changes: dict[str, Any]) -> Any:
        entity = await self.get(entity_id)
        if changes.get("name") is not None:
            name = changes["name"].strip()
            await self._ensure_name_free(name, exclude_id=entity.id)
            entity.name = name
        if "description" in changes:
            entity.description = changes["description"]
        return await self._repo.update(entity)

    async def delete(self, entity_id: str) -> None:
        entity = await self.get(entity_id)
        await self._repo.delete(entity)
        logger.info("Deleted %s %s", self.resource_type, entity_id)


class RoleService(_NamedEntityService):
    """Roles. The configured admin role cannot be renamed.

    Admin rights follow the role name carried in the token, so renaming that
    role would demote every admin at their next login.
    """

    resource_type = "role"
    model = Role

    def __init__(self, repo: RoleRepository, *, admin_role_name: str = "admin") -> None:
        super().__init__(repo)
        self._admin_role_name = admin_role_name

    async def update(self, entity_id: str, changes: dict[str, Any]) -> Any:
        new_name = changes.get("name")
        if new_name is not None:
            role = await self.get(entity_id)
            admin = self._admin_role_name.casefold()
            if role.name.casefold() == admin and new_name.strip().casefold() != admin:
                raise ValidationException("The admin role cannot be renamed", field="name")
        return await super().update(entity_id, changes)


class PracticeAreaService(_NamedEntityService):
    resource_type = "practice_area"
    model = PracticeArea
