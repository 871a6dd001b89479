"""Users API: admin user management and per-user document listing."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from firmdesk.api.v1.dependencies import (
    CurrentPrincipal,
    get_document_service,
    get_user_service,
    get_user_service_for_write,
    require_permission,
)
from firmdesk.application.services import DocumentService, Principal, UserService
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.document import DocumentResponse
from firmdesk.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
    _: Annotated[Principal, Depends(require_permission("user", "list"))],
):
    """List all users (admin)."""
    return [UserResponse.model_validate(u) for u in await user_service.list_users()]


@router.post("", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("user", "create"))],
):
    """Create a user (admin). Unknown roleId or practiceAreaIds -> 400."""
    profile = await user_service.create_user(
        email=body.email,
        password=body.password,
        name=body.name,
        role_id=body.role_id,
        is_active=body.is_active,
        practice_area_ids=body.practice_area_ids,
    )
    return UserResponse.model_validate(profile)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service)],
    _: Annotated[Principal, Depends(require_permission("user", "read"))],
):
    return UserResponse.model_validate(await user_service.get_user(user_id))


@router.patch("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: str,
    body: UserUpdateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("user", "update"))],
):
    """Partial update (admin). A new password is re-hashed."""
    profile = await user_service.update_user(
        user_id, body.model_dump(exclude_unset=True)
    )
    return UserResponse.model_validate(profile)


@router.delete("/{user_id}", status_code=204)
@limit_writes
async def delete_user(
    request: Request,
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
    _: Annotated[Principal, Depends(require_permission("user", "delete"))],
):
    """Delete a user (admin). 409 while cases, assignments or uploads remain."""
    await user_service.delete_user(user_id)
    return Response(status_code=204)


@router.get("/{user_id}/documents", response_model=list[DocumentResponse])
async def list_user_documents(
    user_id: str,
    principal: CurrentPrincipal,
    document_service: Annotated[DocumentService, Depends(get_document_service)],
):
    """Documents reachable by the user through their cases and folders.

    Non-admins may only list their own.
    """
    documents = await document_service.list_for_user(principal, user_id)
    return [DocumentResponse.model_validate(d) for d in documents]
