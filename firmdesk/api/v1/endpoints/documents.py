"""Documents API: upload into a case or folder, metadata, download, rename, delete."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile
from fastapi.responses import StreamingResponse

from firmdesk.api.v1.dependencies import (
    CurrentPrincipal,
    get_document_service,
    get_document_service_for_write,
    require_permission,
)
from firmdesk.application.services import DocumentService, Principal
from firmdesk.core.config import get_settings
from firmdesk.core.limiter import limit_upload, limit_writes
from firmdesk.schemas.document import DocumentResponse, DocumentUpdateRequest

router = APIRouter()

ReadService = Annotated[DocumentService, Depends(get_document_service)]
WriteService = Annotated[DocumentService, Depends(get_document_service_for_write)]


def _content_disposition(filename: str) -> str:
    ascii_name = filename.encode("ascii", "ignore").decode().replace('"', "") or "download"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    document_service: ReadService,
    principal: Annotated[Principal, Depends(require_permission("document", "list"))],
):
    """All documents, newest first (admin)."""
    documents = await document_service.list_all(principal)
    return [DocumentResponse.model_validate(d) for d in documents]


@router.post("", response_model=DocumentResponse, status_code=201)
@limit_upload
async def upload_document(
    request: Request,
    principal: CurrentPrincipal,
    document_service: WriteService,
    file: UploadFile = File(...),
    case_id: str | None = Form(None, alias="caseId"),
    folder_id: str | None = Form(None, alias="folderId"),
):
    """Upload a file into exactly one case or folder (multipart form)."""
    max_size = get_settings().max_upload_size
    content = await file.read(max_size + 1)
    document = await document_service.upload(
        principal,
        filename=file.filename,
        content_type=file.content_type,
        content=content,
        case_id=case_id,
        folder_id=folder_id,
    )
    return DocumentResponse.model_validate(document)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str, principal: CurrentPrincipal, document_service: ReadService
):
    """Metadata; access follows the parent case or folder."""
    document = await document_service.get_document(principal, document_id)
    return DocumentResponse.model_validate(document)


@router.get("/{document_id}/download")
async def download_document(
    document_id: str, principal: CurrentPrincipal, document_service: ReadService
):
    """Stream the stored file."""
    document, chunks = await document_service.open_download(principal, document_id)
    return StreamingResponse(
        chunks,
        media_type=document.mime_type,
        headers={"Content-Disposition": _content_disposition(document.name)},
    )


@router.patch("/{document_id}", response_model=DocumentResponse)
@limit_writes
async def rename_document(
    request: Request,
    document_id: str,
    body: DocumentUpdateRequest,
    principal: CurrentPrincipal,
    document_service: WriteService,
):
    """Rename (uploader or admin)."""
    document = await document_service.rename(principal, document_id, body.name)
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=204)
@limit_writes
async def delete_document(
    request: Request,
    document_id: str,
    document_service: WriteService,
    principal: Annotated[Principal, Depends(require_permission("document", "delete"))],
):
    """Delete the row and its stored file (admin)."""
    await document_service.delete_document(principal, document_id)
    return Response(status_code=204)
