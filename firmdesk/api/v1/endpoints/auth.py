"""Auth API: login and the current user's profile (get/update me)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from firmdesk.api.v1.dependencies import (
    CurrentPrincipal,
    get_auth_service,
    get_user_service_for_write,
)
from firmdesk.application.services import AuthService, UserService
from firmdesk.core.limiter import limit_auth, limit_writes
from firmdesk.schemas.auth import LoginRequest, LoginResponse, UpdateMeRequest
from firmdesk.schemas.user import UserResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return a bearer token and the user."""
    token, profile = await auth_service.login(body.email, body.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(profile))


@router.get("/me", response_model=UserResponse)
async def get_me(
    principal: CurrentPrincipal,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Current user's profile with role name and practice areas."""
    return UserResponse.model_validate(await auth_service.me(principal.user_id))


@router.patch("/me", response_model=UserResponse)
@limit_writes
async def update_me(
    request: Request,
    body: UpdateMeRequest,
    principal: CurrentPrincipal,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Update own name, email or password (password needs currentPassword)."""
    profile = await user_service.update_me(
        principal.user_id,
        name=body.name,
        email=body.email,
        password=body.password,
        current_password=body.current_password,
    )
    return UserResponse.model_validate(profile)
