"""Tests for the token service and password hashing."""

import time
from datetime import timedelta

import pytest
from jose import jwt

from firmdesk.domain.exceptions import InvalidTokenException
from firmdesk.infrastructure.security.jwt import TokenService
from firmdesk.infrastructure.security.password import (
    dummy_hash,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


def test_token_round_trip_carries_user_and_role() -> None:
    service = TokenService(SECRET)
    claims = service.decode(service.create_token("user-1", "lawyer"))
    assert claims.user_id == "user-1"
    assert claims.role == "lawyer"


def test_token_claims_include_sub_user_id_role_exp() -> None:
    token = TokenService(SECRET).create_token("user-1", None)
    payload = jwt.get_unverified_claims(token)
    assert payload["sub"] == "user-1"
    assert payload["userId"] == "user-1"
    assert payload["role"] is None
    assert "exp" in payload


def test_default_lifetime_is_seven_days() -> None:
    before = time.time()
    claims = TokenService(SECRET).decode(TokenService(SECRET).create_token("u", "admin"))
    remaining = claims.expires_at.timestamp() - before
    assert 7 * 24 * 3600 - 60 < remaining <= 7 * 24 * 3600 + 1


def test_expired_token_rejected() -> None:
    service = TokenService(SECRET)
    token = service.create_token("user-1", "lawyer", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidTokenException):
        service.decode(token)


def test_wrong_secret_rejected() -> None:
    token = TokenService("other-secret").create_token("user-1", "lawyer")
    with pytest.raises(InvalidTokenException):
        TokenService(SECRET).decode(token)


def test_garbage_token_rejected() -> None:
    with pytest.raises(InvalidTokenException):
        TokenService(SECRET).decode("not-a-jwt")


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        TokenService("")


def test_password_hash_and_verify() -> None:
    digest = hash_password("s3cret-pass", rounds=4)
    assert digest != "s3cret-pass"
    assert verify_password("s3cret-pass", digest)
    assert not verify_password("wrong", digest)


def test_long_passwords_are_not_truncated() -> None:
    base = "x" * 80
    digest = hash_password(base + "a", rounds=4)
    assert not verify_password(base + "b", digest)


def test_malformed_digest_never_matches() -> None:
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_dummy_hash_is_cached_and_valid() -> None:
    assert dummy_hash(4) is dummy_hash(4)
    assert not verify_password("guess", dummy_hash(4))
