"""Persistence models: ORM entities and mixins."""

from firmdesk.infrastructure.persistence.models.case import (
    Case,
    CaseAssignment,
    CaseNumberSequence,
)
from firmdesk.infrastructure.persistence.models.document import Document
from firmdesk.infrastructure.persistence.models.firm_settings import FirmSettings
from firmdesk.infrastructure.persistence.models.folder import Folder
from firmdesk.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CreatedModel,
    CuidMixin,
    TimestampedModel,
    TimestampMixin,
)
from firmdesk.infrastructure.persistence.models.practice_area import (
    PracticeArea,
    UserPracticeArea,
)
from firmdesk.infrastructure.persistence.models.role import Role
from firmdesk.infrastructure.persistence.models.user import User

__all__ = [
    "Case",
    "CaseAssignment",
    "CaseNumberSequence",
    "Document",
    "FirmSettings",
    "Folder",
    "PracticeArea",
    "Role",
    "User",
    "UserPracticeArea",
    "CreatedAtMixin",
    "CreatedModel",
    "CuidMixin",
    "TimestampedModel",
    "TimestampMixin",
]
