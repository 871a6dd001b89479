"""Per-(prefix, year) counter backing case-number generation."""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from firmdesk.infrastructure.persistence.models import Case, CaseNumberSequence
from firmdesk.infrastructure.persistence.repositories.base import dialect_insert


class CaseNumberSequenceRepository:
    """Reserves sequence values with a single UPDATE ... RETURNING per call.

    The row for (prefix, year) is seeded on first use from the number of cases
    already numbered for that year, so existing data keeps its numbering. The
    UPDATE takes a row lock, so concurrent transactions serialize on it and
    never receive the same value.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _count_existing(self, prefix: str, year: int) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Case)
            .where(Case.case_number.like(f"{prefix}-{year}-%"))
        )
        return int(result.scalar_one())

    async def _seed(self, prefix: str, year: int) -> None:
        seed = await self._count_existing(prefix, year)
        stmt = (
            dialect_insert(self.db, CaseNumberSequence)
            .values(prefix=prefix, year=year, last_value=seed)
            .on_conflict_do_nothing(index_elements=["prefix", "year"])
        )
        await self.db.execute(stmt)

    async def reserve_next(self, prefix: str, year: int) -> int:
        """Increment and return the counter for (prefix, year)."""
        stmt = (
            update(CaseNumberSequence)
            .where(
                CaseNumberSequence.prefix == prefix,
                CaseNumberSequence.year == year,
            )
            .values(last_value=CaseNumberSequence.last_value + 1)
            .returning(CaseNumberSequence.last_value)
        )
        value = (await self.db.execute(stmt)).scalar_one_or_none()
        if value is None:
            await self._seed(prefix, year)
            value = (await self.db.execute(stmt)).scalar_one()
        return int(value)
