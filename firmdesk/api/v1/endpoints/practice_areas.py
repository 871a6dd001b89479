"""Practice areas API: readable by any signed-in user, managed by admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from firmdesk.api.v1.dependencies import (
    get_practice_area_service,
    get_practice_area_service_for_write,
    require_permission,
)
from firmdesk.application.services import PracticeAreaService, Principal
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.practice_area import (
    PracticeAreaCreateRequest,
    PracticeAreaResponse,
    PracticeAreaUpdateRequest,
)

router = APIRouter()

ReadService = Annotated[PracticeAreaService, Depends(get_practice_area_service)]
WriteService = Annotated[
    PracticeAreaService, Depends(get_practice_area_service_for_write)
]


@router.get("", response_model=list[PracticeAreaResponse])
async def list_practice_areas(
    service: ReadService,
    _: Annotated[Principal, Depends(require_permission("practice_area", "list"))],
):
    return [PracticeAreaResponse.model_validate(p) for p in await service.list_all()]


@router.post("", response_model=PracticeAreaResponse, status_code=201)
@limit_writes
async def create_practice_area(
    request: Request,
    body: PracticeAreaCreateRequest,
    service: WriteService,
    _: Annotated[Principal, Depends(require_permission("practice_area", "create"))],
):
    """Create a practice area (admin). Duplicate name -> 409."""
    area = await service.create(body.name, body.description)
    return PracticeAreaResponse.model_validate(area)


@router.get("/{practice_area_id}", response_model=PracticeAreaResponse)
async def get_practice_area(
    practice_area_id: str,
    service: ReadService,
    _: Annotated[Principal, Depends(require_permission("practice_area", "read"))],
):
    return PracticeAreaResponse.model_validate(await service.get(practice_area_id))


@router.patch("/{practice_area_id}", response_model=PracticeAreaResponse)
@limit_writes
async def update_practice_area(
    request: Request,
    practice_area_id: str,
    body: PracticeAreaUpdateRequest,
    service: WriteService,
    _: Annotated[Principal, Depends(require_permission("practice_area", "update"))],
):
    area = await service.update(practice_area_id, body.model_dump(exclude_unset=True))
    return PracticeAreaResponse.model_validate(area)


@router.delete("/{practice_area_id}", status_code=204)
@limit_writes
async def delete_practice_area(
    request: Request,
    practice_area_id: str,
    service: WriteService,
    _: Annotated[Principal, Depends(require_permission("practice_area", "delete"))],
):
    """Delete (admin). 409 while cases or users reference it."""
    await service.delete(practice_area_id)
    return Response(status_code=204)
