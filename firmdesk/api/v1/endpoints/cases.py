"""Cases API: visibility-filtered listing, CRUD, assignments and case documents."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from firmdesk.api.v1.dependencies import (
    CurrentPrincipal,
    get_case_service,
    get_case_service_for_write,
    get_document_service,
    require_permission,
)
from firmdesk.application.services import CaseService, DocumentService, Principal
from firmdesk.core.limiter import limit_writes
from firmdesk.schemas.case import (
    AssignUserRequest,
    CaseAssignmentResponse,
    CaseCreateRequest,
    CaseResponse,
    CaseUpdateRequest,
)
from firmdesk.schemas.document import DocumentResponse
from firmdesk.schemas.user import UserSummaryResponse

router = APIRouter()

ReadService = Annotated[CaseService, Depends(get_case_service)]
WriteService = Annotated[CaseService, Depends(get_case_service_for_write)]


@router.get("", response_model=list[CaseResponse])
async def list_cases(principal: CurrentPrincipal, case_service: ReadService):
    """Admins see every case; others see cases they created or are assigned to."""
    cases = await case_service.list_cases(principal)
    return [CaseResponse.model_validate(c) for c in cases]


@router.post("", response_model=CaseResponse, status_code=201)
@limit_writes
async def create_case(
    request: Request,
    body: CaseCreateRequest,
    principal: CurrentPrincipal,
    case_service: WriteService,
):
    """Create a case owned by the caller; the case number is generated."""
    case = await case_service.create_case(
        principal,
        title=body.title,
        description=body.description,
        client_name=body.client_name,
        practice_area_id=body.practice_area_id,
        status=body.status,
    )
    return CaseResponse.model_validate(case)


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(case_id: str, principal: CurrentPrincipal, case_service: ReadService):
    return CaseResponse.model_validate(await case_service.get_case(principal, case_id))


@router.patch("/{case_id}", response_model=CaseResponse)
@limit_writes
async def update_case(
    request: Request,
    case_id: str,
    body: CaseUpdateRequest,
    principal: CurrentPrincipal,
    case_service: WriteService,
):
    """Partial update (creator or admin)."""
    case = await case_service.update_case(
        principal, case_id, body.model_dump(exclude_unset=True)
    )
    return CaseResponse.model_validate(case)


@router.delete("/{case_id}", status_code=204)
@limit_writes
async def delete_case(
    request: Request,
    case_id: str,
    case_service: WriteService,
    principal: Annotated[Principal, Depends(require_permission("case", "delete"))],
):
    """Delete a case (admin). 409 while documents or assignments remain."""
    await case_service.delete_case(principal, case_id)
    return Response(status_code=204)


@router.post(
    "/{case_id}/assign", response_model=CaseAssignmentResponse, status_code=201
)
@limit_writes
async def assign_user(
    request: Request,
    case_id: str,
    body: AssignUserRequest,
    principal: CurrentPrincipal,
    case_service: WriteService,
):
    """Assign a user to the case (creator or admin)."""
    assignment = await case_service.assign_user(principal, case_id, body.user_id)
    return CaseAssignmentResponse.model_validate(assignment)


@router.delete("/{case_id}/users/{user_id}", status_code=204)
@limit_writes
async def unassign_user(
    request: Request,
    case_id: str,
    user_id: str,
    principal: CurrentPrincipal,
    case_service: WriteService,
):
    """Remove a user's assignment (creator or admin); 404 if not assigned."""
    await case_service.unassign_user(principal, case_id, user_id)
    return Response(status_code=204)


@router.get("/{case_id}/users", response_model=list[UserSummaryResponse])
async def list_case_users(
    case_id: str, principal: CurrentPrincipal, case_service: ReadService
):
    """Users assigned to the case."""
    users = await case_service.list_assigned_users(principal, case_id)
    return [UserSummaryResponse.model_validate(u) for u in users]


@router.get("/{case_id}/assignments", response_model=list[CaseAssignmentResponse])
async def list_case_assignments(
    case_id: str, principal: CurrentPrincipal, case_service: ReadService
):
    assignments = await case_service.list_assignments(principal, case_id)
    return [CaseAssignmentResponse.model_validate(a) for a in assignments]


@router.get("/{case_id}/documents", response_model=list[DocumentResponse])
async def list_case_documents(
    case_id: str,
    principal: CurrentPrincipal,
    document_service: Annotated[DocumentService, Depends(get_document_service)],
):
    documents = await document_service.list_for_case(principal, case_id)
    return [DocumentResponse.model_validate(d) for d in documents]
