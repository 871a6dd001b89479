"""Tests for the access policy table and its evaluation."""

import pytest

from firmdesk.application.services.access_policy import (
    ADMIN_REQUIRED,
    POLICY,
    AccessPolicy,
    Principal,
    Relation,
)
from firmdesk.domain.exceptions import AuthorizationException

ADMIN = Principal(user_id="u-admin", role="admin")
LAWYER = Principal(user_id="u-lawyer", role="lawyer")
NO_ROLE = Principal(user_id="u-none", role=None)

policy = AccessPolicy()


def test_admin_passes_every_rule() -> None:
    """Admins pass every (resource, action) without any relation."""
    for resource, action in POLICY:
        assert policy.allows(ADMIN, resource, action)


def test_admin_role_name_is_case_insensitive() -> None:
    assert Principal(user_id="x", role="Admin").is_admin
    assert Principal(user_id="x", role="ADMIN").is_admin
    assert not NO_ROLE.is_admin


def test_custom_admin_role_name() -> None:
    principal = Principal(user_id="x", role="partner", admin_role_name="Partner")
    assert principal.is_admin


@pytest.mark.parametrize(
    "resource,action",
    [
        ("user", "list"),
        ("user", "create"),
        ("user", "delete"),
        ("role", "create"),
        ("practice_area", "delete"),
        ("settings", "read"),
        ("settings", "update"),
        ("document", "list"),
        ("document", "delete"),
        ("case", "delete"),
    ],
)
def test_admin_only_rules_reject_non_admin(resource: str, action: str) -> None:
    """Admin-only rules deny non-admins even with every relation held."""
    assert policy.is_admin_only(resource, action)
    with pytest.raises(AuthorizationException) as exc_info:
        policy.require(LAWYER, resource, action, set(Relation))
    assert exc_info.value.message == ADMIN_REQUIRED
    assert exc_info.value.error_code == "PERMISSION_DENIED"


def test_case_read_allows_creator_and_assignee() -> None:
    assert policy.allows(LAWYER, "case", "read", {Relation.CREATOR})
    assert policy.allows(LAWYER, "case", "read", {Relation.ASSIGNEE})
    assert not policy.allows(LAWYER, "case", "read", set())


def test_case_update_and_assign_need_creator() -> None:
    """Assignees can read but not modify or reassign a case."""
    for action in ("update", "assign", "unassign"):
        assert policy.allows(LAWYER, "case", action, {Relation.CREATOR})
        assert not policy.allows(LAWYER, "case", action, {Relation.ASSIGNEE})


def test_folder_access_needs_creator_only() -> None:
    """Folders are stricter than cases: assignment grants nothing."""
    assert policy.allows(LAWYER, "folder", "read", {Relation.CREATOR})
    assert not policy.allows(LAWYER, "folder", "read", {Relation.ASSIGNEE})


def test_open_rules_need_authentication_only() -> None:
    assert policy.allows(NO_ROLE, "case", "create")
    assert policy.allows(NO_ROLE, "practice_area", "list")
    assert policy.allows(NO_ROLE, "folder", "list")


def test_denial_message_names_missing_relationship() -> None:
    with pytest.raises(AuthorizationException) as exc_info:
        policy.require(LAWYER, "case", "read")
    assert "assigned to this case" in exc_info.value.message
    assert exc_info.value.details == {"resource": "case", "action": "read"}


def test_own_documents_only_for_self() -> None:
    assert policy.allows(LAWYER, "user", "documents", {Relation.SELF})
    assert not policy.allows(LAWYER, "user", "documents")


def test_unknown_rule_raises_key_error() -> None:
    with pytest.raises(KeyError):
        policy.allows(ADMIN, "invoice", "read")
