"""Application services (use cases) and the access policy."""

from firmdesk.application.services.access_policy import (
    POLICY,
    AccessPolicy,
    Principal,
    Relation,
    Rule,
    access_policy,
)
from firmdesk.application.services.auth_service import AuthService
from firmdesk.application.services.case_numbers import (
    CaseNumberGenerator,
    format_case_number,
)
from firmdesk.application.services.case_service import CaseService
from firmdesk.application.services.document_service import DocumentService
from firmdesk.application.services.folder_service import FolderService
from firmdesk.application.services.settings_service import SettingsService
from firmdesk.application.services.taxonomy_service import (
    PracticeAreaService,
    RoleService,
)
from firmdesk.application.services.user_service import UserService

__all__ = [
    "POLICY",
    "AccessPolicy",
    "AuthService",
    "CaseNumberGenerator",
    "CaseService",
    "DocumentService",
    "FolderService",
    "PracticeAreaService",
    "Principal",
    "Relation",
    "RoleService",
    "Rule",
    "SettingsService",
    "UserService",
    "access_policy",
    "format_case_number",
]
