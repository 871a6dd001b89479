"""Roles API (admin): list, get, create, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from firmdesk.api.v1.dependencies import (
    get_role_service,
    get_role_service_for_write,
    require_permission,
)
from firmdesk.application.services import Principal, RoleService
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.role import RoleCreateRequest, RoleResponse, RoleUpdateRequest

router = APIRouter()


@router.get("", response_model=list[RoleResponse])
async def list_roles(
    role_service: Annotated[RoleService, Depends(get_role_service)],
    _: Annotated[Principal, Depends(require_permission("role", "list"))],
):
    """List roles ordered by name."""
    return [RoleResponse.model_validate(r) for r in await role_service.list_all()]


@router.post("", response_model=RoleResponse, status_code=201)
@limit_writes
async def create_role(
    request: Request,
    body: RoleCreateRequest,
    role_service: Annotated[RoleService, Depends(get_role_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("role", "create"))],
):
    """Create a role. Duplicate name -> 409."""
    role = await role_service.create(body.name, body.description)
    return RoleResponse.model_validate(role)


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(
    role_id: str,
    role_service: Annotated[RoleService, Depends(get_role_service)],
    _: Annotated[Principal, Depends(require_permission("role", "read"))],
):
    return RoleResponse.model_validate(await role_service.get(role_id))


@router.patch("/{role_id}", response_model=RoleResponse)
@limit_writes
async def update_role(
    request: Request,
    role_id: str,
    body: RoleUpdateRequest,
    role_service: Annotated[RoleService, Depends(get_role_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("role", "update"))],
):
    role = await role_service.update(role_id, body.model_dump(exclude_unset=True))
    return RoleResponse.model_validate(role)


@router.delete("/{role_id}", status_code=204)
@limit_writes
async def delete_role(
    request: Request,
    role_id: str,
    role_service: Annotated[RoleService, Depends(get_role_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("role", "delete"))],
):
    """Delete a role. 409 while any user holds it."""
    await role_service.delete(role_id)
    return Response(status_code=204)
