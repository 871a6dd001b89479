"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation.
"""

from firmdesk.domain.enums import CaseStatus
from firmdesk.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DuplicateResourceException,
    FirmDeskException,
    IntegrityConflictException,
    InvalidTokenException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "CaseStatus",
    "AuthenticationException",
    "AuthorizationException",
    "DuplicateResourceException",
    "FirmDeskException",
    "IntegrityConflictException",
    "InvalidTokenException",
    "ResourceNotFoundException",
    "ValidationException",
]
