"""Document use cases: upload into a case or folder, read, download, rename, delete.

Access to a document follows its parent: case creator/assignee for case
documents, folder owner for folder documents. Renaming is reserved to the
uploader; deleting to admins.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator

from sqlalchemy.sql import func

from firmdesk.application.services.access_policy import (
    AccessPolicy,
    Principal,
    Relation,
    access_policy,
)
from firmdesk.application.services.case_service import CaseService
from firmdesk.application.services.folder_service import FolderService
from firmdesk.domain.exceptions import ResourceNotFoundException, ValidationException
from firmdesk.infrastructure.exceptions import StorageNotFoundError
from firmdesk.infrastructure.persistence.models import Document
from firmdesk.infrastructure.persistence.repositories import (
    DocumentRepository,
    UserRepository,
)
from firmdesk.infrastructure.storage.local_storage import LocalFileStorage

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def sanitize_filename(filename: str | None) -> str:
    """Basename without path separators or NULs; "upload" if nothing is left."""
    name = os.path.basename((filename or "").replace("\\", "/"))
    name = name.replace("\x00", "").strip()
    return name or "upload"


def file_type(filename: str) -> str:
    """Upper-case extension without the dot ("brief.pdf" -> "PDF")."""
    return os.path.splitext(filename)[1].lstrip(".").upper()


def display_size(num_bytes: int) -> str:
    """Size in whole kilobytes, rounded half up ("1536 bytes" -> "2 KB")."""
    return f"{(num_bytes + 512) // 1024} KB"


class DocumentService:
    def __init__(
        self,
        document_repo: DocumentRepository,
        user_repo: UserRepository,
        storage: LocalFileStorage,
        case_service: CaseService,
        folder_service: FolderService,
        *,
        max_upload_size: int,
        policy: AccessPolicy = access_policy,
    ) -> None:
        self._document_repo = document_repo
        self._user_repo = user_repo
        self._storage = storage
        self._max_upload_size = max_upload_size
        self._policy = policy
        self._cases = case_service
        self._folders = folder_service

    async def _relations(self, principal: Principal, document: Document) -> set[Relation]:
        if principal.is_admin:
            return set()
        if document.case_id is not None:
            relations = await self._cases.relations_to(principal, document.case_id)
        elif document.folder_id is not None:
            relations = await self._folders.relations_to(principal, document.folder_id)
        else:
            relations = set()
        if document.uploaded_by_id == principal.user_id:
            relations.add(Relation.UPLOADER)
        return relations

    async def authorize(
        self, principal: Principal, document_id: str, action: str
    ) -> Document:
        document = await self._document_repo.get_by_id(document_id)
        if document is None:
            raise ResourceNotFoundException("document", document_id)
        relations = await self._relations(principal, document)
        self._policy.require(principal, "document", action, relations)
        return document

    async def list_all(self, principal: Principal) -> list[Document]:
        self._policy.require(principal, "document", "list")
        return await self._document_repo.list_all()

    async def list_for_case(self, principal: Principal, case_id: str) -> list[Document]:
        case = await self._cases.authorize(principal, case_id, "documents")
        return await self._document_repo.list_by_case(case.id)

    async def list_for_folder(
        self, principal: Principal, folder_id: str
    ) -> list[Document]:
        folder = await self._folders.authorize(principal, folder_id, "documents")
        return await self._document_repo.list_by_folder(folder.id)

    async def list_for_user(self, principal: Principal, user_id: str) -> list[Document]:
        """Documents visible to user_id through their cases and folders."""
        if await self._user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        relations = {Relation.SELF} if user_id == principal.user_id else set()
        self._policy.require(principal, "user", "documents", relations)
        return await self._document_repo.list_for_user(user_id)

    async def upload(
        self,
        principal: Principal,
        *,
        filename: str | None,
        content_type: str | None,
        content: bytes,
        case_id: str | None = None,
        folder_id: str | None = None,
    ) -> Document:
        """Store the file and create its metadata row (version 1).

        Exactly one of case_id / folder_id must be given and the caller must
        be allowed to upload into that parent.
        """
        case_id = case_id or None
        folder_id = folder_id or None
        if (case_id is None) == (folder_id is None):
            raise ValidationException(
                "Exactly one of caseId or folderId is required", field="caseId"
            )
        if len(content) > self._max_upload_size:
            raise ValidationException(
                f"File exceeds maximum size of {self._max_upload_size // (1024 * 1024)} MB",
                field="file",
            )
        if case_id is not None:
            await self._cases.authorize(principal, case_id, "upload")
        else:
            await self._folders.authorize(principal, folder_id, "upload")

        name = sanitize_filename(filename)
        storage_ref = await self._storage.save(content, name)
        try:
            document = await self._document_repo.create(
                Document(
                    name=name,
                    type=file_type(name),
                    mime_type=content_type or DEFAULT_MIME_TYPE,
                    size=display_size(len(content)),
                    case_id=case_id,
                    folder_id=folder_id,
                    uploaded_by_id=principal.user_id,
                    version=1,
                    storage_ref=storage_ref,
                )
            )
        except Exception:
            await self._storage.delete(storage_ref)
            raise
        logger.info("Uploaded document %s (%d bytes)", document.id, len(content))
        return document

    async def get_document(self, principal: Principal, document_id: str) -> Document:
        return await self.authorize(principal, document_id, "read")

    async def open_download(
        self, principal: Principal, document_id: str
    ) -> tuple[Document, AsyncIterator[bytes]]:
        """Return the document and a chunk iterator over its stored file."""
        document = await self.authorize(principal, document_id, "download")
        if not await self._storage.exists(document.storage_ref):
            raise StorageNotFoundError(document.storage_ref)
        return document, self._storage.stream(document.storage_ref)

    async def rename(self, principal: Principal, document_id: str, name: str) -> Document:
        document = await self.authorize(principal, document_id, "update")
        document.name = sanitize_filename(name)
        document.updated_at = func.now()
        return await self._document_repo.update(document)

    async def delete_document(self, principal: Principal, document_id: str) -> None:
        """Delete the row, then the stored file; a leftover file is only logged."""
        document = await self.authorize(principal, document_id, "delete")
        storage_ref = document.storage_ref
        await self._document_repo.delete(document)
        try:
            removed = await self._storage.delete(storage_ref)
        except OSError as e:
            logger.warning("Could not remove stored file %s: %s", storage_ref, e)
        else:
            if not removed:
                logger.warning("Stored file %s was already missing", storage_ref)
        logger.info("Deleted document %s", document_id)
