"""Firm settings API (admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from firmdesk.api.v1.dependencies import (
    get_settings_service_for_write,
    require_permission,
)
from firmdesk.application.services import Principal, SettingsService
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.settings import SettingsResponse, SettingsUpdateRequest

router = APIRouter()

Service = Annotated[SettingsService, Depends(get_settings_service_for_write)]


@router.get("", response_model=SettingsResponse)
async def get_firm_settings(
    service: Service,
    _: Annotated[Principal, Depends(require_permission("settings", "read"))],
):
    """Return the settings row, creating it with defaults on first read."""
    return SettingsResponse.model_validate(await service.get_settings())


@router.patch("", response_model=SettingsResponse)
@limit_writes
async def update_firm_settings(
    request: Request,
    body: SettingsUpdateRequest,
    service: Service,
    _: Annotated[Principal, Depends(require_permission("settings", "update"))],
):
    """Partial update; creates the row when none exists (firmName and location required)."""
    settings = await service.update_settings(body.model_dump(exclude_unset=True))
    return SettingsResponse.model_validate(settings)
