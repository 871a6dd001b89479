"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the caller's identity, the role gate and the
application services. Each service comes in a read flavor (plain session) and
a write flavor (session inside a transaction that commits when the request
succeeds and rolls back when it raises). A route uses one flavor only, so a
request never holds two database sessions.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.application.services import (
    AuthService,
    CaseNumberGenerator,
    CaseService,
    DocumentService,
    FolderService,
    PracticeAreaService,
    Principal,
    RoleService,
    SettingsService,
    UserService,
    access_policy,
)
from firmdesk.application.services.access_policy import ADMIN_REQUIRED
from firmdesk.core.config import Settings, get_settings
from firmdesk.domain.exceptions import AuthenticationException, AuthorizationException
from firmdesk.infrastructure.persistence.database import get_db, get_db_transactional
from firmdesk.infrastructure.persistence.repositories import (
    CaseNumberSequenceRepository,
    CaseRepository,
    DocumentRepository,
    FolderRepository,
    PracticeAreaRepository,
    RoleRepository,
    SettingsRepository,
    UserRepository,
)
from firmdesk.infrastructure.security.jwt import TokenService
from firmdesk.infrastructure.storage.local_storage import LocalFileStorage

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]
AppSettings = Annotated[Settings, Depends(get_settings)]


# ---- Auth (principal from JWT) ----

_http_bearer = HTTPBearer(auto_error=False)


def get_token_service(settings: AppSettings) -> TokenService:
    """Token service keyed by the configured secret (composition root)."""
    return TokenService(
        secret_key=settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
    settings: AppSettings,
) -> Principal:
    """Return the caller from the bearer token.

    No token: 401 "Access token required". Bad or expired token: 403.
    The token is trusted as issued; the user row is not re-read.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Access token required")
    claims = token_service.decode(credentials.credentials)
    return Principal(
        user_id=claims.user_id,
        role=claims.role,
        admin_role_name=settings.admin_role_name,
    )


CurrentPrincipal = Annotated[Principal, Depends(get_principal)]


def require_permission(resource: str, action: str):
    """Dependency factory: authenticated caller, plus admin for admin-only rules.

    Relationship rules are evaluated later by the service, once the resource
    has been loaded.
    """
    admin_only = access_policy.is_admin_only(resource, action)

    async def _require(principal: CurrentPrincipal) -> Principal:
        if admin_only and not principal.is_admin:
            raise AuthorizationException(
                ADMIN_REQUIRED, resource=resource, action=action
            )
        return principal

    return _require


# ---- Service builders ----


def get_storage(settings: AppSettings) -> LocalFileStorage:
    return LocalFileStorage(settings.storage_root)


def _user_service(db: AsyncSession, settings: Settings) -> UserService:
    return UserService(
        UserRepository(db),
        RoleRepository(db),
        PracticeAreaRepository(db),
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def _case_service(db: AsyncSession, settings: Settings) -> CaseService:
    return CaseService(
        CaseRepository(db),
        PracticeAreaRepository(db),
        UserRepository(db),
        number_generator=CaseNumberGenerator(
            CaseNumberSequenceRepository(db), settings.case_number_prefix
        ),
    )


def _document_service(
    db: AsyncSession, settings: Settings, storage: LocalFileStorage
) -> DocumentService:
    return DocumentService(
        DocumentRepository(db),
        UserRepository(db),
        storage,
        _case_service(db, settings),
        FolderService(FolderRepository(db)),
        max_upload_size=settings.max_upload_size,
    )


def get_auth_service(
    db: ReadSession,
    settings: AppSettings,
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(
        UserRepository(db),
        _user_service(db, settings),
        token_service,
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def get_user_service(db: ReadSession, settings: AppSettings) -> UserService:
    return _user_service(db, settings)


def get_user_service_for_write(db: WriteSession, settings: AppSettings) -> UserService:
    return _user_service(db, settings)


def get_role_service(db: ReadSession, settings: AppSettings) -> RoleService:
    return RoleService(RoleRepository(db), admin_role_name=settings.admin_role_name)


def get_role_service_for_write(db: WriteSession, settings: AppSettings) -> RoleService:
    return RoleService(RoleRepository(db), admin_role_name=settings.admin_role_name)


def get_practice_area_service(db: ReadSession) -> PracticeAreaService:
    return PracticeAreaService(PracticeAreaRepository(db))


def get_practice_area_service_for_write(db: WriteSession) -> PracticeAreaService:
    return PracticeAreaService(PracticeAreaRepository(db))


def get_case_service(db: ReadSession, settings: AppSettings) -> CaseService:
    return _case_service(db, settings)


def get_case_service_for_write(db: WriteSession, settings: AppSettings) -> CaseService:
    return _case_service(db, settings)


def get_folder_service(db: ReadSession) -> FolderService:
    return FolderService(FolderRepository(db))


def get_folder_service_for_write(db: WriteSession) -> FolderService:
    return FolderService(FolderRepository(db))


def get_document_service(
    db: ReadSession,
    settings: AppSettings,
    storage: Annotated[LocalFileStorage, Depends(get_storage)],
) -> DocumentService:
    return _document_service(db, settings, storage)


def get_document_service_for_write(
    db: WriteSession,
    settings: AppSettings,
    storage: Annotated[LocalFileStorage, Depends(get_storage)],
) -> DocumentService:
    return _document_service(db, settings, storage)


def get_settings_service_for_write(
    db: WriteSession, settings: AppSettings
) -> SettingsService:
    """Settings reads may create the row, so both routes use a transaction."""
    return SettingsService(
        SettingsRepository(db),
        default_firm_name=settings.default_firm_name,
        default_location=settings.default_firm_location,
    )
