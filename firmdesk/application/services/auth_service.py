"""Authentication use case: email + password login returning a bearer token."""

from __future__ import annotations

import asyncio
import logging

from firmdesk.application.dtos.user import UserProfile
from firmdesk.application.services.user_service import UserService, normalize_email
from firmdesk.domain.exceptions import AuthenticationException
from firmdesk.infrastructure.persistence.repositories import UserRepository
from firmdesk.infrastructure.security.jwt import TokenService
from firmdesk.infrastructure.security.password import (
    DEFAULT_ROUNDS,
    dummy_hash,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        user_service: UserService,
        token_service: TokenService,
        *,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ) -> None:
        self._user_repo = user_repo
        self._user_service = user_service
        self._token_service = token_service
        self._bcrypt_rounds = bcrypt_rounds

    async def login(self, email: str, password: str) -> tuple[str, UserProfile]:
        """Return (token, profile).

        Unknown email, wrong password and inactive account all raise the same
        AuthenticationException; unknown emails still pay for a bcrypt check.
        """
        user = await self._user_repo.get_by_email(normalize_email(email))
        digest = user.hashed_password if user else dummy_hash(self._bcrypt_rounds)
        valid = await asyncio.to_thread(verify_password, password, digest)
        if user is None or not valid or not user.is_active:
            logger.info("Failed login attempt")
            raise AuthenticationException(INVALID_CREDENTIALS)
        profile = await self._user_service.to_profile(user)
        token = self._token_service.create_token(user.id, profile.role)
        return token, profile

    async def me(self, user_id: str) -> UserProfile:
        return await self._user_service.get_user(user_id)
