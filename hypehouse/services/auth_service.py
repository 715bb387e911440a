"""Authorization gate: identity lookup and the admin role check."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.core.exceptions import BadRequestException, ConflictException
from hypehouse.core.security import hash_password, verify_password
from hypehouse.database import bind_identity
from hypehouse.models.user import User, UserRole, ROLE_ADMIN, ROLES

logger = logging.getLogger(__name__)


class AuthService:
    """Service for admin sessions and role grants."""

    @staticmethod
    async def is_admin(db: AsyncSession, user_id: Optional[uuid.UUID]) -> bool:
        """
        True iff a user_roles row exists for user_id with role 'admin'.

        Anonymous callers (None) are never admins.
        """
        if user_id is None:
            return False

        result = await db.execute(
            select(UserRole.id)
            .where(UserRole.user_id == user_id, UserRole.role == ROLE_ADMIN)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    @staticmethod
    async def get_active_user(db: AsyncSession, user_id: uuid.UUID) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None or not user.is_active:
            return None
        return user

    @staticmethod
    async def authenticate_admin(db: AsyncSession, email: str, password: str) -> Optional[User]:
        """
        Check admin credentials.

        Returns None for an unknown email, a wrong password, an inactive
        account and a non-admin account alike, so callers cannot tell them apart.
        """
        result = await db.execute(
            select(User).where(User.email == email.strip().lower())
        )
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.password_hash):
            return None

        if not user.is_active:
            return None

        await bind_identity(db, user.id)
        if not await AuthService.is_admin(db, user.id):
            logger.info(f"Rejected admin login for non-admin user {user.id}")
            return None

        user.last_login = datetime.now(timezone.utc)
        await db.commit()
        return user

    @staticmethod
    async def grant_role(db: AsyncSession, user_id: uuid.UUID, role: str) -> UserRole:
        if role not in ROLES:
            raise BadRequestException(f"Unknown role: {role}")

        result = await db.execute(
            select(UserRole).where(UserRole.user_id == user_id, UserRole.role == role)
        )
        existing = result.scalar_one_or_none()
        if existing:
            return existing

        user_role = UserRole(user_id=user_id, role=role)
        db.add(user_role)
        await db.commit()
        await db.refresh(user_role)
        return user_role

    @staticmethod
    async def create_user(
        db: AsyncSession,
        email: str,
        password: str,
        roles: Iterable[str] = (),
    ) -> User:
        """Create an identity and grant it the given roles."""
        email = email.strip().lower()
        roles = list(roles)
        result = await db.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none():
            raise ConflictException("Email already registered")

        user = User(email=email, password_hash=hash_password(password))
        db.add(user)
        await db.commit()
        await db.refresh(user)

        for role in roles:
            await AuthService.grant_role(db, user.id, role)

        logger.info(f"Created user {user.id} with roles {roles}")
        return user
