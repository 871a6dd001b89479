"""Practice area API schemas."""

from pydantic import Field

from firmdesk.schemas.common import CamelModel, UtcDateTime


class PracticeAreaCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class PracticeAreaUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class PracticeAreaResponse(CamelModel):
    id: str
    name: str
    description: str | None
    created_at: UtcDateTime
