import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Boolean, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Identity principal that admin sessions are issued for."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True
    )

    roles: Mapped[list["UserRole"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"


class UserRole(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Role grant. An 'admin' row is the only thing that authorizes CMS access."""

    __tablename__ = "user_roles"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    role: Mapped[str] = mapped_column(String(20))

    __table_args__ = (
        UniqueConstraint("user_id", "role", name="unique_user_role"),
        CheckConstraint("role IN ('admin', 'user')", name="ck_user_roles_role"),
    )

    user: Mapped["User"] = relationship(back_populates="roles")

    def __repr__(self) -> str:
        return f"<UserRole {self.user_id}:{self.role}>"
