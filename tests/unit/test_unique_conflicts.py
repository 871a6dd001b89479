"""Unique-constraint violations surface as DuplicateResourceException.

The services check names and emails before writing; these tests write past
that check, as a concurrent request would, and expect a 409-mapped error
rather than a raw IntegrityError.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.domain.exceptions import DuplicateResourceException
from firmdesk.infrastructure.persistence.models import PracticeArea, Role, User
from firmdesk.infrastructure.persistence.repositories import (
    PracticeAreaRepository,
    RoleRepository,
    UserRepository,
)


async def test_duplicate_role_insert(db_session: AsyncSession, seeded) -> None:
    with pytest.raises(DuplicateResourceException) as exc_info:
        async with db_session.begin():
            await RoleRepository(db_session).create(Role(name="lawyer"))
    assert exc_info.value.message == "Role 'lawyer' already exists"
    assert exc_info.value.error_code == "DUPLICATE_RESOURCE"


async def test_duplicate_practice_area_insert(db_session: AsyncSession, seeded) -> None:
    with pytest.raises(DuplicateResourceException) as exc_info:
        async with db_session.begin():
            await PracticeAreaRepository(db_session).create(PracticeArea(name="Corporate Law"))
    assert exc_info.value.message == "Practice area 'Corporate Law' already exists"


async def test_duplicate_email_insert(db_session: AsyncSession, make_user) -> None:
    existing = await make_user()
    with pytest.raises(DuplicateResourceException) as exc_info:
        async with db_session.begin():
            await UserRepository(db_session).create(
                User(email=existing.email, hashed_password="x", name="Copy")
            )
    assert exc_info.value.message == "Email already in use"
    assert exc_info.value.details == {"field": "email"}


async def test_duplicate_email_update(db_session: AsyncSession, make_user) -> None:
    first = await make_user()
    second = await make_user()
    taken = first.email
    with pytest.raises(DuplicateResourceException):
        async with db_session.begin():
            second.email = taken
            await UserRepository(db_session).update(second)
