"""Domain enumerations for firmdesk."""

from enum import Enum


class CaseStatus(str, Enum):
    """Lifecycle status of a case."""

    ACTIVE = "active"
    PENDING = "pending"
    REVIEW = "review"
    COMPLETED = "completed"
