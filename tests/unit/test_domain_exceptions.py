"""Tests for domain exceptions (error_code, message, details, to_dict)."""

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
from firmdesk.infrastructure.exceptions import StorageNotFoundError


def test_base_exception_default_error_code() -> None:
    """FirmDeskException uses class name as error_code when not provided."""
    exc = FirmDeskException("Something failed")
    assert exc.error_code == "FirmDeskException"
    assert exc.details == {}
    assert exc.to_dict() == {"error": "FirmDeskException", "message": "Something failed"}


def test_validation_exception_lists_field_error() -> None:
    exc = ValidationException("Practice area not found", field="practiceAreaId")
    body = exc.to_dict()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["errors"] == [
        {"field": "practiceAreaId", "message": "Practice area not found"}
    ]


def test_validation_exception_without_field() -> None:
    body = ValidationException("Bad input").to_dict()
    assert body["errors"] == []
    assert "details" not in body


def test_auth_exceptions() -> None:
    assert AuthenticationException().error_code == "AUTHENTICATION_ERROR"
    assert InvalidTokenException().message == "Invalid or expired token"
    exc = AuthorizationException(resource="case", action="delete")
    assert exc.message == "Permission denied"
    assert exc.details == {"resource": "case", "action": "delete"}


def test_not_found_message_is_capitalized() -> None:
    exc = ResourceNotFoundException("practice area", "pa-1")
    assert exc.message == "Practice area not found"
    assert exc.details == {"resource_type": "practice area", "resource_id": "pa-1"}


def test_integrity_conflict_and_duplicate() -> None:
    exc = IntegrityConflictException("Cannot delete role assigned to users.", "roles", "r1")
    assert exc.error_code == "INTEGRITY_CONFLICT"
    assert exc.details["resource_id"] == "r1"
    dup = DuplicateResourceException("Email already in use", "email")
    assert dup.error_code == "DUPLICATE_RESOURCE"
    assert dup.details == {"field": "email"}


def test_storage_errors_extend_base() -> None:
    exc = StorageNotFoundError("2026/01/abc.pdf")
    assert isinstance(exc, FirmDeskException)
    assert exc.error_code == "STORAGE_NOT_FOUND"
