"""Password hashing (bcrypt over a SHA-256 pre-hash).

Bcrypt reads at most 72 bytes; hashing the password with SHA-256 first gives
a fixed-length input so long passwords are not silently truncated.
"""

import base64
import hashlib
from functools import lru_cache

import bcrypt

DEFAULT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return the bcrypt digest of password as text."""
    digest = bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds))
    return digest.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True if plain_password matches; malformed digests never match."""
    try:
        return bool(
            bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=4)
def dummy_hash(rounds: int = DEFAULT_ROUNDS) -> str:
    """A throwaway digest checked when a login email is unknown.

    Keeps the unknown-email path as slow as the wrong-password path.
    """
    return hash_password("firmdesk-timing-equalizer", rounds)
