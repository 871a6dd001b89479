"""Repositories over the SQLAlchemy models."""

from firmdesk.infrastructure.persistence.repositories.base import BaseRepository
from firmdesk.infrastructure.persistence.repositories.case_number_repo import (
    CaseNumberSequenceRepository,
)
from firmdesk.infrastructure.persistence.repositories.case_repo import CaseRepository
from firmdesk.infrastructure.persistence.repositories.document_repo import (
    DocumentRepository,
)
from firmdesk.infrastructure.persistence.repositories.folder_repo import (
    FolderRepository,
)
from firmdesk.infrastructure.persistence.repositories.practice_area_repo import (
    PracticeAreaRepository,
)
from firmdesk.infrastructure.persistence.repositories.role_repo import RoleRepository
from firmdesk.infrastructure.persistence.repositories.settings_repo import (
    SettingsRepository,
)
from firmdesk.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CaseNumberSequenceRepository",
    "CaseRepository",
    "DocumentRepository",
    "FolderRepository",
    "PracticeAreaRepository",
    "RoleRepository",
    "SettingsRepository",
    "UserRepository",
]
