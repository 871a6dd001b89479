"""Seed default roles, practice areas and the admin account.

Usage:
    python -m scripts.seed [admin_password]
Safe to run repeatedly; only missing rows are created. The admin password
defaults to "admin123" (change it after first login).
"""

import asyncio
import sys

from firmdesk.core.config import get_settings
from firmdesk.infrastructure.persistence import database
from firmdesk.infrastructure.persistence.seed import ADMIN_EMAIL, seed_defaults
from firmdesk.shared.telemetry.logging import setup_logging

DEFAULT_ADMIN_PASSWORD = "admin123"


async def main() -> None:
    settings = get_settings()
    setup_logging()
    admin_password = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ADMIN_PASSWORD

    database.get_engine()
    assert database.AsyncSessionLocal is not None
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                report = await seed_defaults(
                    session,
                    admin_password=admin_password,
                    admin_role_name=settings.admin_role_name,
                    bcrypt_rounds=settings.bcrypt_rounds,
                )
    finally:
        await database.dispose_engine()

    for name in report.roles_created:
        print(f"Created role: {name}")
    for name in report.practice_areas_created:
        print(f"Created practice area: {name}")
    if report.admin_created:
        print(f"Created admin user: {ADMIN_EMAIL} / {admin_password}")
    else:
        print(f"Admin user already exists: {ADMIN_EMAIL}")


if __name__ == "__main__":
    asyncio.run(main())
