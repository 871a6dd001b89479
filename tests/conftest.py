"""Pytest configuration and fixtures for firmdesk.

Tests run against a SQLite file (aiosqlite) in a temporary directory. The
environment is set before firmdesk is imported so get_settings() picks it up;
tables are created and dropped around every DB test.
"""

import os
import shutil
import tempfile
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

_TMP_DIR = tempfile.mkdtemp(prefix="firmdesk-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["STORAGE_ROOT"] = os.path.join(_TMP_DIR, "uploads")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import select  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from firmdesk.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from firmdesk.infrastructure.persistence import database  # noqa: E402
from firmdesk.infrastructure.persistence.database import Base  # noqa: E402
from firmdesk.infrastructure.persistence.models import (  # noqa: E402
    PracticeArea,
    Role,
    User,
)
from firmdesk.infrastructure.persistence.seed import seed_defaults  # noqa: E402
from firmdesk.infrastructure.security.jwt import TokenService  # noqa: E402
from firmdesk.infrastructure.security.password import hash_password  # noqa: E402
from firmdesk.main import app  # noqa: E402

ADMIN_PASSWORD = "admin123"
USER_PASSWORD = "secret123"


@pytest.fixture
async def schema() -> AsyncIterator[None]:
    """Create all tables before the test; drop them and uploaded files after."""
    engine = database.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await database.dispose_engine()
    shutil.rmtree(get_settings().storage_root, ignore_errors=True)


@pytest.fixture
async def db_session(schema: None) -> AsyncIterator[AsyncSession]:
    """Session for arranging data. Commit after every change so the app can write."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(schema: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@dataclass
class Seeded:
    admin: User
    admin_role: Role
    lawyer_role: Role
    practice_area: PracticeArea
    other_practice_area: PracticeArea


@pytest.fixture
async def seeded(db_session: AsyncSession) -> Seeded:
    """Default roles, practice areas and the admin account."""
    async with db_session.begin():
        await seed_defaults(db_session, admin_password=ADMIN_PASSWORD, bcrypt_rounds=4)
    roles = {r.name: r for r in (await db_session.scalars(select(Role))).all()}
    areas = {a.name: a for a in (await db_session.scalars(select(PracticeArea))).all()}
    admin = await db_session.scalar(select(User).where(User.role_id == roles["admin"].id))
    await db_session.commit()
    assert admin is not None
    return Seeded(
        admin=admin,
        admin_role=roles["admin"],
        lawyer_role=roles["lawyer"],
        practice_area=areas["Corporate Law"],
        other_practice_area=areas["Real Estate"],
    )


MakeUser = Callable[..., Awaitable[User]]


@pytest.fixture
def make_user(db_session: AsyncSession, seeded: Seeded) -> MakeUser:
    """Factory: insert a user (lawyer by default) and return it."""
    counter = {"n": 0}

    async def _make(
        name: str = "Jane Wanjiru",
        email: str | None = None,
        password: str = USER_PASSWORD,
        role: Role | None = None,
        is_active: bool = True,
        with_role: bool = True,
    ) -> User:
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@firm.co.ke",
            hashed_password=hash_password(password, rounds=4),
            name=name,
            role_id=(role or seeded.lawyer_role).id if with_role else None,
            is_active=is_active,
        )
        db_session.add(user)
        await db_session.commit()
        return user

    return _make


@pytest.fixture
def token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret_key=settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


HeadersFor = Callable[[User, str | None], dict[str, str]]


@pytest.fixture
def headers_for(token_service: TokenService) -> HeadersFor:
    """Build Authorization headers for a user with the given role name."""

    def _headers(user: User, role: str | None = "lawyer") -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.create_token(user.id, role)}"}

    return _headers


@pytest.fixture
def admin_headers(seeded: Seeded, headers_for: HeadersFor) -> dict[str, str]:
    return headers_for(seeded.admin, "admin")
