"""Case use cases: listing by visibility, numbering, updates and assignments."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.sql import func

from firmdesk.application.services.access_policy import (
    AccessPolicy,
    Principal,
    Relation,
    access_policy,
)
from firmdesk.application.services.case_numbers import CaseNumberGenerator
from firmdesk.domain.enums import CaseStatus
from firmdesk.domain.exceptions import ResourceNotFoundException, ValidationException
from firmdesk.infrastructure.persistence.models import Case, CaseAssignment, User
from firmdesk.infrastructure.persistence.repositories import (
    CaseRepository,
    PracticeAreaRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

_UPDATABLE = ("title", "description", "client_name", "practice_area_id", "status")


async def case_relations(
    case_repo: CaseRepository, principal: Principal, case: Case
) -> set[Relation]:
    """Relations the principal holds to case (creator and/or assignee)."""
    relations: set[Relation] = set()
    if case.created_by_id == principal.user_id:
        relations.add(Relation.CREATOR)
    if await case_repo.is_assigned(case.id, principal.user_id):
        relations.add(Relation.ASSIGNEE)
    return relations


class CaseService:
    """Every read or write resolves the case first (404), then checks access (403)."""

    def __init__(
        self,
        case_repo: CaseRepository,
        practice_area_repo: PracticeAreaRepository,
        user_repo: UserRepository,
        number_generator: CaseNumberGenerator | None = None,
        policy: AccessPolicy = access_policy,
    ) -> None:
        self._case_repo = case_repo
        self._practice_area_repo = practice_area_repo
        self._user_repo = user_repo
        self._numbers = number_generator
        self._policy = policy

    async def _validate_practice_area(self, practice_area_id: str) -> None:
        if await self._practice_area_repo.get_by_id(practice_area_id) is None:
            raise ValidationException(
                "Practice area not found", field="practiceAreaId"
            )

    async def authorize(self, principal: Principal, case_id: str, action: str) -> Case:
        """Load the case and require `action` on it; returns the case."""
        case = await self._case_repo.get_by_id(case_id)
        if case is None:
            raise ResourceNotFoundException("case", case_id)
        relations = (
            set()
            if principal.is_admin
            else await case_relations(self._case_repo, principal, case)
        )
        self._policy.require(principal, "case", action, relations)
        return case

    async def relations_to(self, principal: Principal, case_id: str) -> set[Relation]:
        """Relations to case_id; empty when the case does not exist."""
        case = await self._case_repo.get_by_id(case_id)
        if case is None:
            return set()
        return await case_relations(self._case_repo, principal, case)

    async def list_cases(self, principal: Principal) -> list[Case]:
        if principal.is_admin:
            return await self._case_repo.list_all()
        return await self._case_repo.list_visible_to(principal.user_id)

    async def create_case(
        self,
        principal: Principal,
        *,
        title: str,
        client_name: str,
        practice_area_id: str,
        description: str | None = None,
        status: CaseStatus | str = CaseStatus.PENDING,
    ) -> Case:
        if self._numbers is None:
            raise RuntimeError("CaseService.create_case needs a number generator")
        self._policy.require(principal, "case", "create")
        await self._validate_practice_area(practice_area_id)
        case = Case(
            case_number=await self._numbers.next_number(),
            title=title,
            description=description,
            client_name=client_name,
            practice_area_id=practice_area_id,
            status=CaseStatus(status).value,
            created_by_id=principal.user_id,
        )
        case = await self._case_repo.create(case)
        logger.info("Created case %s (%s)", case.id, case.case_number)
        return case

    async def get_case(self, principal: Principal, case_id: str) -> Case:
        return await self.authorize(principal, case_id, "read")

    async def update_case(
        self, principal: Principal, case_id: str, changes: dict[str, Any]
    ) -> Case:
        """Apply the supplied fields only; refreshes updated_at."""
        case = await self.authorize(principal, case_id, "update")
        if changes.get("practice_area_id") is not None:
            await self._validate_practice_area(changes["practice_area_id"])
        for key in _UPDATABLE:
            if key not in changes:
                continue
            value = changes[key]
            if value is None and key != "description":
                continue
            if key == "status":
                value = CaseStatus(value).value
            setattr(case, key, value)
        case.updated_at = func.now()
        return await self._case_repo.update(case)

    async def delete_case(self, principal: Principal, case_id: str) -> None:
        """Guarded delete; 409 while documents or assignments remain."""
        case = await self.authorize(principal, case_id, "delete")
        await self._case_repo.delete(case)
        logger.info("Deleted case %s", case_id)

    async def assign_user(
        self, principal: Principal, case_id: str, user_id: str
    ) -> CaseAssignment:
        """Create an assignment row. Repeat assignments are stored as-is."""
        case = await self.authorize(principal, case_id, "assign")
        if await self._user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        assignment = await self._case_repo.assign(case.id, user_id)
        logger.info("Assigned user %s to case %s", user_id, case.id)
        return assignment

    async def unassign_user(
        self, principal: Principal, case_id: str, user_id: str
    ) -> None:
        case = await self.authorize(principal, case_id, "unassign")
        removed = await self._case_repo.unassign(case.id, user_id)
        if not removed:
            raise ResourceNotFoundException("assignment", f"{case.id}:{user_id}")
        logger.info("Unassigned user %s from case %s", user_id, case.id)

    async def list_assigned_users(
        self, principal: Principal, case_id: str
    ) -> list[User]:
        case = await self.authorize(principal, case_id, "users")
        user_ids = await self._case_repo.assigned_user_ids(case.id)
        return await self._user_repo.get_by_ids(user_ids)

    async def list_assignments(
        self, principal: Principal, case_id: str
    ) -> list[CaseAssignment]:
        case = await self.authorize(principal, case_id, "assignments")
        return await self._case_repo.list_assignments(case.id)
