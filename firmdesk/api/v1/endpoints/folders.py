"""Folders API: personal document folders."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from firmdesk.api.v1.dependencies import (
    CurrentPrincipal,
    get_document_service,
    get_folder_service,
    get_folder_service_for_write,
)
from firmdesk.application.services import DocumentService, FolderService
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.document import DocumentResponse
from firmdesk.schemas.folder import (
    FolderCreateRequest,
    FolderResponse,
    FolderUpdateRequest,
)

router = APIRouter()

ReadService = Annotated[FolderService, Depends(get_folder_service)]
WriteService = Annotated[FolderService, Depends(get_folder_service_for_write)]


@router.get("", response_model=list[FolderResponse])
async def list_folders(principal: CurrentPrincipal, folder_service: ReadService):
    """Admins see all folders; others see their own."""
    folders = await folder_service.list_folders(principal)
    return [FolderResponse.model_validate(f) for f in folders]


@router.post("", response_model=FolderResponse, status_code=201)
@limit_writes
async def create_folder(
    request: Request,
    body: FolderCreateRequest,
    principal: CurrentPrincipal,
    folder_service: WriteService,
):
    folder = await folder_service.create_folder(principal, body.name, body.description)
    return FolderResponse.model_validate(folder)


@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(
    folder_id: str, principal: CurrentPrincipal, folder_service: ReadService
):
    folder = await folder_service.get_folder(principal, folder_id)
    return FolderResponse.model_validate(folder)


@router.patch("/{folder_id}", response_model=FolderResponse)
@limit_writes
async def update_folder(
    request: Request,
    folder_id: str,
    body: FolderUpdateRequest,
    principal: CurrentPrincipal,
    folder_service: WriteService,
):
    folder = await folder_service.update_folder(
        principal, folder_id, body.model_dump(exclude_unset=True)
    )
    return FolderResponse.model_validate(folder)


@router.delete("/{folder_id}", status_code=204)
@limit_writes
async def delete_folder(
    request: Request,
    folder_id: str,
    principal: CurrentPrincipal,
    folder_service: WriteService,
):
    """Delete (owner or admin). 409 while the folder holds documents."""
    await folder_service.delete_folder(principal, folder_id)
    return Response(status_code=204)


@router.get("/{folder_id}/documents", response_model=list[DocumentResponse])
async def list_folder_documents(
    folder_id: str,
    principal: CurrentPrincipal,
    document_service: Annotated[DocumentService, Depends(get_document_service)],
):
    documents = await document_service.list_for_folder(principal, folder_id)
    return [DocumentResponse.model_validate(d) for d in documents]
