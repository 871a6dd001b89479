"""Folder use cases. Folders are private to their creator (and admins)."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.sql import func

from firmdesk.application.services.access_policy import (
    AccessPolicy,
    Principal,
    Relation,
    access_policy,
)
from firmdesk.domain.exceptions import ResourceNotFoundException
from firmdesk.infrastructure.persistence.models import Folder
from firmdesk.infrastructure.persistence.repositories import FolderRepository

logger = logging.getLogger(__name__)


def folder_relations(principal: Principal, folder: Folder) -> set[Relation]:
    if folder.created_by_id == principal.user_id:
        return {Relation.CREATOR}
    return set()


class FolderService:
    def __init__(
        self, folder_repo: FolderRepository, policy: AccessPolicy = access_policy
    ) -> None:
        self._folder_repo = folder_repo
        self._policy = policy

    async def authorize(
        self, principal: Principal, folder_id: str, action: str
    ) -> Folder:
        folder = await self._folder_repo.get_by_id(folder_id)
        if folder is None:
            raise ResourceNotFoundException("folder", folder_id)
        self._policy.require(
            principal, "folder", action, folder_relations(principal, folder)
        )
        return folder

    async def relations_to(
        self, principal: Principal, folder_id: str
    ) -> set[Relation]:
        folder = await self._folder_repo.get_by_id(folder_id)
        return folder_relations(principal, folder) if folder else set()

    async def list_folders(self, principal: Principal) -> list[Folder]:
        if principal.is_admin:
            return await self._folder_repo.list_all()
        return await self._folder_repo.list_by_owner(principal.user_id)

    async def create_folder(
        self, principal: Principal, name: str, description: str | None = None
    ) -> Folder:
        self._policy.require(principal, "folder", "create")
        folder = await self._folder_repo.create(
            Folder(name=name, description=description, created_by_id=principal.user_id)
        )
        logger.info("Created folder %s", folder.id)
        return folder

    async def get_folder(self, principal: Principal, folder_id: str) -> Folder:
        return await self.authorize(principal, folder_id, "read")

    async def update_folder(
        self, principal: Principal, folder_id: str, changes: dict[str, Any]
    ) -> Folder:
        folder = await self.authorize(principal, folder_id, "update")
        if changes.get("name") is not None:
            folder.name = changes["name"]
        if "description" in changes:
            folder.description = changes["description"]
        folder.updated_at = func.now()
        return await self._folder_repo.update(folder)

    async def delete_folder(self, principal: Principal, folder_id: str) -> None:
        """Guarded delete; 409 while the folder still holds documents."""
        folder = await self.authorize(principal, folder_id, "delete")
        await self._folder_repo.delete(folder)
        logger.info("Deleted folder %s", folder_id)
