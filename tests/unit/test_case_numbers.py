"""Tests for case number formatting and per-year sequence reservation."""

from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.application.services.case_numbers import (
    CaseNumberGenerator,
    format_case_number,
)
from firmdesk.infrastructure.persistence.models import Case
from firmdesk.infrastructure.persistence.repositories import (
    CaseNumberSequenceRepository,
)


def test_format_pads_to_four_digits() -> None:
    assert format_case_number("CFL", 2024, 1) == "CFL-2024-0001"
    assert format_case_number("CFL", 2024, 42) == "CFL-2024-0042"


def test_format_keeps_digits_beyond_four() -> None:
    assert format_case_number("CFL", 2024, 12345) == "CFL-2024-12345"


async def test_generator_is_sequential(db_session: AsyncSession) -> None:
    generator = CaseNumberGenerator(CaseNumberSequenceRepository(db_session), "CFL")
    async with db_session.begin():
        numbers = [await generator.next_number(2024) for _ in range(3)]
    assert numbers == ["CFL-2024-0001", "CFL-2024-0002", "CFL-2024-0003"]


async def test_generator_restarts_each_year(db_session: AsyncSession) -> None:
    generator = CaseNumberGenerator(CaseNumberSequenceRepository(db_session), "CFL")
    async with db_session.begin():
        assert await generator.next_number(2024) == "CFL-2024-0001"
        assert await generator.next_number(2025) == "CFL-2025-0001"
        assert await generator.next_number(2024) == "CFL-2024-0002"


async def test_generator_continues_from_existing_cases(
    db_session: AsyncSession, seeded, make_user
) -> None:
    """A fresh counter starts after the cases already numbered that year."""
    owner = await make_user()
    async with db_session.begin():
        for n in (1, 2):
            db_session.add(
                Case(
                    case_number=f"CFL-2023-000{n}",
                    title=f"Matter {n}",
                    client_name="Acme Ltd",
                    practice_area_id=seeded.practice_area.id,
                    created_by_id=owner.id,
                )
            )
    generator = CaseNumberGenerator(CaseNumberSequenceRepository(db_session), "CFL")
    async with db_session.begin():
        assert await generator.next_number(2023) == "CFL-2023-0003"


async def test_prefixes_have_independent_counters(db_session: AsyncSession) -> None:
    repo = CaseNumberSequenceRepository(db_session)
    async with db_session.begin():
        assert await CaseNumberGenerator(repo, "CFL").next_number(2024) == "CFL-2024-0001"
        assert await CaseNumberGenerator(repo, "LIT").next_number(2024) == "LIT-2024-0001"
