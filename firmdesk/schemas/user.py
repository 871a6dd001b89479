"""User API schemas."""

from pydantic import EmailStr, Field

from firmdesk.schemas.common import CamelModel, UtcDateTime

MIN_PASSWORD_LENGTH = 6


class UserCreateRequest(CamelModel):
    """Request body for creating a user (admin)."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=256)
    name: str = Field(..., min_length=1, max_length=255)
    role_id: str | None = None
    is_active: bool = True
    practice_area_ids: list[str] = Field(default_factory=list, max_length=100)


class UserUpdateRequest(CamelModel):
    """Request body for updating a user (partial). practiceAreaIds replaces links."""

    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=MIN_PASSWORD_LENGTH, max_length=256
    )
    name: str | None = Field(default=None, min_length=1, max_length=255)
    role_id: str | None = None
    is_active: bool | None = None
    practice_area_ids: list[str] | None = Field(default=None, max_length=100)


class PracticeAreaRefResponse(CamelModel):
    id: str
    name: str


class UserResponse(CamelModel):
    """User with role name and practice areas (no password)."""

    id: str
    email: str
    name: str
    role_id: str | None
    role: str | None
    is_active: bool
    created_at: UtcDateTime
    practice_areas: list[PracticeAreaRefResponse] = Field(default_factory=list)
    practice_area_ids: list[str] = Field(default_factory=list)


class UserSummaryResponse(CamelModel):
    """User row without derived fields (case member lists)."""

    id: str
    email: str
    name: str
    role_id: str | None
    is_active: bool
    created_at: UtcDateTime
