"""
Provision an admin account for the CMS.

There is no public sign-up: admins are created here and then log in
through POST /api/v1/admin/login.

Usage:
  python -m scripts.create_admin admin@hypehouse.example
  python -m scripts.create_admin existing@hypehouse.example --grant-only

Environment variables required:
  - DATABASE_URL: must point at the database owner role so role grants
    are written past row-level security
  - JWT_SECRET_KEY
"""

import argparse
import asyncio
import getpass
import logging

from sqlalchemy import select

from hypehouse.database import AsyncSessionLocal, engine
from hypehouse.models.user import User, ROLE_ADMIN
from hypehouse.services.auth_service import AuthService

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def provision(email: str, password: str | None) -> None:
    async with AsyncSessionLocal() as db:
        if password is None:
            result = await db.execute(select(User).where(User.email == email.strip().lower()))
            user = result.scalar_one_or_none()
            if user is None:
                raise SystemExit(f"No user with email {email}")
            await AuthService.grant_role(db, user.id, ROLE_ADMIN)
            logger.info(f"Granted admin to {user.email}")
        else:
            user = await AuthService.create_user(db, email, password, roles=[ROLE_ADMIN])
            logger.info(f"Created admin {user.email} ({user.id})")

    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a CMS admin account")
    parser.add_argument("email")
    parser.add_argument(
        "--grant-only",
        action="store_true",
        help="Grant the admin role to an existing user instead of creating one",
    )
    args = parser.parse_args()

    password = None
    if not args.grant_only:
        password = getpass.getpass("Password: ")
        if len(password) < 8:
            raise SystemExit("Password must be at least 8 characters")

    asyncio.run(provision(args.email, password))


if __name__ == "__main__":
    main()
