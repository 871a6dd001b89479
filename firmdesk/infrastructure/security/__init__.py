"""Security: JWT tokens and password hashing."""

from firmdesk.infrastructure.security.jwt import TokenClaims, TokenService
from firmdesk.infrastructure.security.password import (
    dummy_hash,
    hash_password,
    verify_password,
)

__all__ = [
    "TokenClaims",
    "TokenService",
    "dummy_hash",
    "hash_password",
    "verify_password",
]
