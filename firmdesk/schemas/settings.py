"""Firm settings API schemas."""

from pydantic import Field

from firmdesk.schemas.common import CamelModel, UtcDateTime


class SettingsUpdateRequest(CamelModel):
    firm_name: str | None = Field(default=None, min_length=1, max_length=255)
    location: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, max_length=320)


class SettingsResponse(CamelModel):
    id: str
    firm_name: str
    location: str
    address: str | None
    phone: str | None
    email: str | None
    created_at: UtcDateTime
    updated_at: UtcDateTime
