from typing import Optional

from sqlalchemy import String, Text, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin

STATUS_PENDING = "pending"


class DemoSubmission(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Demo sent through the public form. Only admins touch it afterwards."""

    __tablename__ = "demo_submissions"

    artist_name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255))
    genre: Mapped[str] = mapped_column(String(50))
    music_link: Mapped[str] = mapped_column(String(500))
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    social_link: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default=STATUS_PENDING, index=True)
    admin_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'reviewed', 'accepted', 'rejected')",
            name="ck_demo_submissions_status",
        ),
    )

    def __repr__(self) -> str:
        return f"<DemoSubmission {self.artist_name} [{self.status}]>"
