"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted under
/api by create_app().
"""

from fastapi import APIRouter

from firmdesk.api.v1.endpoints import (
    auth,
    cases,
    documents,
    folders,
    health,
    practice_areas,
    roles,
    settings,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(
    practice_areas.router, prefix="/practice-areas", tags=["practice-areas"]
)
api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(folders.router, prefix="/folders", tags=["folders"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
