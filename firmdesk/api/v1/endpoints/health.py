"""Health check endpoint. No auth, no database; used for liveness probes."""

from fastapi import APIRouter

from firmdesk.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
