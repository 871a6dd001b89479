"""JWT access tokens carrying the caller's identity and role.

Claims: sub and userId (both the user id), role (role name or null) and exp.
The signing secret is passed in by the composition root; nothing here reads
configuration at import time.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from firmdesk.domain.exceptions import InvalidTokenException


@dataclass(frozen=True)
class TokenClaims:
    """Decoded, validated token payload."""

    user_id: str
    role: str | None
    expires_at: datetime


class TokenService:
    """Issue and verify HS256 (by default) bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 7 * 24 * 60,
    ) -> None:
        if not secret_key:
            raise ValueError("TokenService requires a non-empty secret key")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def create_token(
        self,
        user_id: str,
        role: str | None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Return a signed token for user_id; expires after expires_delta or the default TTL."""
        ttl = expires_delta if expires_delta is not None else timedelta(
            minutes=self._expire_minutes
        )
        claims: dict[str, Any] = {
            "sub": user_id,
            "userId": user_id,
            "role": role,
            "exp": datetime.now(UTC) + ttl,
        }
        encoded = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return cast(str, encoded)

    def decode(self, token: str) -> TokenClaims:
        """Verify signature and expiry.

        Raises:
            InvalidTokenException: malformed, wrongly signed, expired, or
                missing sub/exp.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            raise InvalidTokenException() from e
        user_id = payload.get("userId") or payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenException()
        role = payload.get("role")
        return TokenClaims(
            user_id=user_id,
            role=role if isinstance(role, str) else None,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )
