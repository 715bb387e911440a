import uuid
from datetime import date
from typing import Optional

from sqlalchemy import String, Boolean, Date, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class MusicRelease(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """
    A single, EP or album.

    artist_name is denormalized: it is copied from the linked Artist when the
    release is written and is never joined live, so listings keep working for
    free-text artists and after the linked artist is removed.
    """

    __tablename__ = "music_releases"

    title: Mapped[str] = mapped_column(String(255))
    artist_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("artists.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    artist_name: Mapped[str] = mapped_column(String(255))
    cover_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    release_date: Mapped[date] = mapped_column(Date)
    genre: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    # Streaming / download links
    spotify_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    apple_music_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    soundcloud_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    download_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<MusicRelease {self.title} by {self.artist_name}>"
