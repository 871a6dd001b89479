"""Auth API schemas (login, current user update)."""

from pydantic import EmailStr, Field

from firmdesk.schemas.common import CamelModel
from firmdesk.schemas.user import MIN_PASSWORD_LENGTH, UserResponse


class LoginRequest(CamelModel):
    """Email is not format-checked here; unknown addresses fail as bad credentials."""

    email: str = Field(..., min_length=1, max_length=320)
    password: str = Field(..., min_length=1, max_length=256)


class LoginResponse(CamelModel):
    token: str
    user: UserResponse


class UpdateMeRequest(CamelModel):
    """Partial update of the caller's profile. Password changes need currentPassword."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=MIN_PASSWORD_LENGTH, max_length=256
    )
    current_password: str | None = Field(default=None, max_length=256)
