"""Document API schemas. Uploads arrive as multipart form data, not JSON."""

from pydantic import Field

from firmdesk.schemas.common import CamelModel, UtcDateTime


class DocumentUpdateRequest(CamelModel):
    """Rename a document."""

    name: str = Field(..., min_length=1, max_length=255)


class DocumentResponse(CamelModel):
    """Document metadata; the storage location is never exposed."""

    id: str
    name: str
    type: str
    mime_type: str
    size: str
    case_id: str | None
    folder_id: str | None
    uploaded_by_id: str
    version: int
    created_at: UtcDateTime
    updated_at: UtcDateTime
