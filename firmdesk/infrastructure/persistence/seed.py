"""Idempotent seed data: default roles, practice areas and the admin account."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import PracticeArea, Role, User
from firmdesk.infrastructure.persistence.repositories import (
    PracticeAreaRepository,
    RoleRepository,
    UserRepository,
)
from firmdesk.infrastructure.security.password import DEFAULT_ROUNDS, hash_password

logger = logging.getLogger(__name__)

DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("admin", "System administrator with full access"),
    ("lawyer", "Legal practitioner handling cases"),
    ("paralegal", "Legal assistant supporting lawyers"),
    ("client", "Client with limited access to their cases"),
)

DEFAULT_PRACTICE_AREAS: tuple[tuple[str, str], ...] = (
    (
        "Corporate Law",
        "Business formation, mergers, acquisitions, and corporate governance",
    ),
    ("Intellectual Property", "Patents, trademarks, copyrights, and trade secrets"),
    ("Real Estate", "Property transactions, leases, and real estate disputes"),
    ("Banking & Finance", "Financial regulations, lending, and securities"),
    ("Dispute Resolution", "Litigation, arbitration, and mediation"),
)

ADMIN_EMAIL = "admin@cfllegal.co.ke"
ADMIN_NAME = "System Administrator"


@dataclass
class SeedReport:
    roles_created: list[str] = field(default_factory=list)
    practice_areas_created: list[str] = field(default_factory=list)
    admin_created: bool = False


async def seed_defaults(
    session: AsyncSession,
    *,
    admin_password: str,
    admin_role_name: str = "admin",
    bcrypt_rounds: int = DEFAULT_ROUNDS,
) -> SeedReport:
    """Create whatever default rows are missing; existing rows are left alone."""
    report = SeedReport()
    role_repo = RoleRepository(session)
    practice_area_repo = PracticeAreaRepository(session)
    user_repo = UserRepository(session)

    for name, description in DEFAULT_ROLES:
        if await role_repo.get_by_name(name) is None:
            await role_repo.create(Role(name=name, description=description))
            report.roles_created.append(name)

    for name, description in DEFAULT_PRACTICE_AREAS:
        if await practice_area_repo.get_by_name(name) is None:
            await practice_area_repo.create(
                PracticeArea(name=name, description=description)
            )
            report.practice_areas_created.append(name)

    if await user_repo.get_by_email(ADMIN_EMAIL) is None:
        admin_role = await role_repo.get_by_name(admin_role_name)
        if admin_role is None:
            raise RuntimeError(
                f"Cannot create admin user: role '{admin_role_name}' not found"
            )
        hashed = await asyncio.to_thread(hash_password, admin_password, bcrypt_rounds)
        await user_repo.create(
            User(
                email=ADMIN_EMAIL,
                hashed_password=hashed,
                name=ADMIN_NAME,
                role_id=admin_role.id,
                is_active=True,
            )
        )
        report.admin_created = True

    logger.info(
        "Seed complete: %d roles, %d practice areas, admin %s",
        len(report.roles_created),
        len(report.practice_areas_created),
        "created" if report.admin_created else "exists",
    )
    return report
