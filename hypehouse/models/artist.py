"""Artist roster model."""

from typing import Optional

from sqlalchemy import String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Artist(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Artist on the label roster."""

    __tablename__ = "artists"

    name: Mapped[str] = mapped_column(String(255))
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    short_bio: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Social links
    spotify_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    soundcloud_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    instagram_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    youtube_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Status flags
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<Artist {self.name}>"
