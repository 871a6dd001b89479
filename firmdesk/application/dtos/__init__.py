"""DTOs returned by application services (no dependency on the web layer)."""

from firmdesk.application.dtos.user import PracticeAreaRef, UserProfile

__all__ = ["PracticeAreaRef", "UserProfile"]
