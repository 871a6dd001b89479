"""Folder API schemas."""

from pydantic import Field

from firmdesk.schemas.common import CamelModel, UtcDateTime


class FolderCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class FolderUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class FolderResponse(CamelModel):
    id: str
    name: str
    description: str | None
    created_by_id: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
