"""DTOs for user use cases."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PracticeAreaRef:
    id: str
    name: str


@dataclass(frozen=True)
class UserProfile:
    """User read-model with role name and practice areas. No password."""

    id: str
    email: str
    name: str
    role_id: str | None
    role: str | None
    is_active: bool
    created_at: datetime
    practice_areas: list[PracticeAreaRef] = field(default_factory=list)

    @property
    def practice_area_ids(self) -> list[str]:
        return [pa.id for pa in self.practice_areas]
