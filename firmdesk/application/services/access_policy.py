"""Access policy: who may do what to which resource.

Two tiers. Admins pass every rule. Everyone else passes only through a
relationship to the resource (creator, assignee, uploader, self) or, for
open operations, by being authenticated at all. Every rule lives in POLICY
so the full matrix can be read and tested in one place; a rule with an empty
relation set is admin-only and is enforced at the route before any lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from firmdesk.domain.exceptions import AuthorizationException

logger = logging.getLogger(__name__)

ADMIN_REQUIRED = "Admin access required"


class Relation(str, Enum):
    """How the caller relates to the resource being accessed."""

    AUTHENTICATED = "authenticated"
    CREATOR = "creator"
    ASSIGNEE = "assignee"
    UPLOADER = "uploader"
    SELF = "self"


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, built from token claims (no database lookup)."""

    user_id: str
    role: str | None
    admin_role_name: str = "admin"

    @property
    def is_admin(self) -> bool:
        if not self.role:
            return False
        return self.role.casefold() == self.admin_role_name.casefold()


@dataclass(frozen=True)
class Rule:
    allowed: frozenset[Relation]
    message: str

    @property
    def admin_only(self) -> bool:
        return not self.allowed


def _admin() -> Rule:
    return Rule(frozenset(), ADMIN_REQUIRED)


def _rule(message: str, *allowed: Relation) -> Rule:
    return Rule(frozenset(allowed), message)


_ANYONE = _rule("Authentication required", Relation.AUTHENTICATED)
_CASE_MEMBER = _rule(
    "Access denied: you must be the creator of or assigned to this case",
    Relation.CREATOR,
    Relation.ASSIGNEE,
)
_CASE_CREATOR = _rule(
    "Access denied: only the case creator can modify this case", Relation.CREATOR
)
_FOLDER_OWNER = _rule("Access denied to this folder", Relation.CREATOR)

POLICY: dict[tuple[str, str], Rule] = {
    # users
    ("user", "list"): _admin(),
    ("user", "read"): _admin(),
    ("user", "create"): _admin(),
    ("user", "update"): _admin(),
    ("user", "delete"): _admin(),
    ("user", "documents"): _rule(
        "Access denied: you can only view your own documents", Relation.SELF
    ),
    # roles
    ("role", "list"): _admin(),
    ("role", "read"): _admin(),
    ("role", "create"): _admin(),
    ("role", "update"): _admin(),
    ("role", "delete"): _admin(),
    # practice areas
    ("practice_area", "list"): _ANYONE,
    ("practice_area", "read"): _ANYONE,
    ("practice_area", "create"): _admin(),
    ("practice_area", "update"): _admin(),
    ("practice_area", "delete"): _admin(),
    # settings
    ("settings", "read"): _admin(),
    ("settings", "update"): _admin(),
    # cases
    ("case", "list"): _ANYONE,
    ("case", "create"): _ANYONE,
    ("case", "read"): _CASE_MEMBER,
    ("case", "documents"): _CASE_MEMBER,
    ("case", "users"): _CASE_MEMBER,
    ("case", "assignments"): _CASE_MEMBER,
    ("case", "upload"): _CASE_MEMBER,
    ("case", "update"): _CASE_CREATOR,
    ("case", "assign"): _CASE_CREATOR,
    ("case", "unassign"): _CASE_CREATOR,
    ("case", "delete"): _admin(),
    # folders
    ("folder", "list"): _ANYONE,
    ("folder", "create"): _ANYONE,
    ("folder", "read"): _FOLDER_OWNER,
    ("folder", "update"): _FOLDER_OWNER,
    ("folder", "delete"): _FOLDER_OWNER,
    ("folder", "upload"): _FOLDER_OWNER,
    ("folder", "documents"): _FOLDER_OWNER,
    # documents (relations derived from the parent case or folder)
    ("document", "list"): _admin(),
    ("document", "read"): _rule(
        "Access denied to this document", Relation.CREATOR, Relation.ASSIGNEE
    ),
    ("document", "download"): _rule(
        "Access denied to this document", Relation.CREATOR, Relation.ASSIGNEE
    ),
    ("document", "update"): _rule(
        "Access denied: only the uploader can modify this document",
        Relation.UPLOADER,
    ),
    ("document", "delete"): _admin(),
}


class AccessPolicy:
    """Evaluate POLICY for a principal."""

    def __init__(self, policy: dict[tuple[str, str], Rule] | None = None) -> None:
        self._policy = policy if policy is not None else POLICY

    def rule(self, resource: str, action: str) -> Rule:
        try:
            return self._policy[(resource, action)]
        except KeyError:
            raise KeyError(f"No access rule for {resource}:{action}") from None

    def is_admin_only(self, resource: str, action: str) -> bool:
        return self.rule(resource, action).admin_only

    def allows(
        self,
        principal: Principal,
        resource: str,
        action: str,
        relations: set[Relation] | frozenset[Relation] = frozenset(),
    ) -> bool:
        rule = self.rule(resource, action)
        if principal.is_admin:
            return True
        held = set(relations) | {Relation.AUTHENTICATED}
        return bool(rule.allowed & held)

    def require(
        self,
        principal: Principal,
        resource: str,
        action: str,
        relations: set[Relation] | frozenset[Relation] = frozenset(),
    ) -> None:
        """Raise AuthorizationException (403) unless the principal passes the rule."""
        if self.allows(principal, resource, action, relations):
            return
        rule = self.rule(resource, action)
        logger.warning(
            "Denied %s:%s for user %s", resource, action, principal.user_id
        )
        raise AuthorizationException(rule.message, resource=resource, action=action)


access_policy = AccessPolicy()
