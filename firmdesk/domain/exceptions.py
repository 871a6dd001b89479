"""Domain exceptions for firmdesk.

Business rule violations raised by services and repositories. Independent
of HTTP; core.exception_handlers maps error_code to a status code.
"""

from typing import Any


class FirmDeskException(Exception):
    """Base exception for all firmdesk errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for an error response body."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(FirmDeskException):
    """Raised when input fails a business validation (e.g. unknown practice area)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        field = self.details.get("field")
        body["errors"] = [{"field": field, "message": self.message}] if field else []
        return body


class AuthenticationException(FirmDeskException):
    """Raised when credentials are missing or wrong."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidTokenException(FirmDeskException):
    """Raised when a bearer token is malformed, has a bad signature, or is expired."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message, "INVALID_TOKEN")


class AuthorizationException(FirmDeskException):
    """Raised when the caller's role or relationship does not allow the operation."""

    def __init__(
        self,
        message: str = "Permission denied",
        resource: str | None = None,
        action: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(FirmDeskException):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type.capitalize()} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class IntegrityConflictException(FirmDeskException):
    """Raised when a delete is blocked because dependent rows still exist."""

    def __init__(self, message: str, resource_type: str, resource_id: str) -> None:
        super().__init__(
            message,
            "INTEGRITY_CONFLICT",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateResourceException(FirmDeskException):
    """Raised when a unique value (email, role name, practice area name) is already taken."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, "DUPLICATE_RESOURCE", {"field": field})
