"""Case number generation: PREFIX-YYYY-NNNN, sequential per prefix and year."""

from __future__ import annotations

from firmdesk.infrastructure.persistence.repositories import (
    CaseNumberSequenceRepository,
)
from firmdesk.shared.utils.datetime import current_year


def format_case_number(prefix: str, year: int, value: int) -> str:
    """CFL, 2024, 7 -> "CFL-2024-0007". Values above 9999 keep all digits."""
    return f"{prefix}-{year}-{value:04d}"


class CaseNumberGenerator:
    """Reserve the next case number inside the caller's transaction."""

    def __init__(self, sequence_repo: CaseNumberSequenceRepository, prefix: str) -> None:
        self._sequence_repo = sequence_repo
        self._prefix = prefix

    async def next_number(self, year: int | None = None) -> str:
        year = year if year is not None else current_year()
        value = await self._sequence_repo.reserve_next(self._prefix, year)
        return format_case_number(self._prefix, year, value)
