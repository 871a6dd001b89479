"""Role API schemas."""

from pydantic import Field

from firmdesk.schemas.common import CamelModel, UtcDateTime


class RoleCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class RoleUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class RoleResponse(CamelModel):
    id: str
    name: str
    description: str | None
    created_at: UtcDateTime
