"""Case and case-assignment API schemas."""

from pydantic import Field

from firmdesk.domain.enums import CaseStatus
from firmdesk.schemas.common import CamelModel, UtcDateTime


class CaseCreateRequest(CamelModel):
    """Case number and creator are assigned by the server."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=10000)
    client_name: str = Field(..., min_length=1, max_length=255)
    practice_area_id: str = Field(..., min_length=1)
    status: CaseStatus = CaseStatus.PENDING


class CaseUpdateRequest(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=10000)
    client_name: str | None = Field(default=None, min_length=1, max_length=255)
    practice_area_id: str | None = Field(default=None, min_length=1)
    status: CaseStatus | None = None


class CaseResponse(CamelModel):
    id: str
    case_number: str
    title: str
    description: str | None
    client_name: str
    practice_area_id: str
    status: str
    created_by_id: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class AssignUserRequest(CamelModel):
    user_id: str = Field(..., min_length=1)


class CaseAssignmentResponse(CamelModel):
    id: str
    case_id: str
    user_id: str
    assigned_at: UtcDateTime
