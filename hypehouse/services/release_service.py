import logging
import uuid
from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.core.exceptions import FieldValidationException
from hypehouse.models.artist import Artist
from hypehouse.models.release import MusicRelease
from hypehouse.schemas.release import ReleaseCreate, ReleaseUpdate
from hypehouse.services.content_service import ActiveToggleMixin, ContentService, FeaturedToggleMixin

logger = logging.getLogger(__name__)


class ReleaseService(ActiveToggleMixin, FeaturedToggleMixin, ContentService[MusicRelease]):
    model = MusicRelease
    label = "Release"

    @classmethod
    def admin_order(cls) -> tuple:
        return (MusicRelease.release_date.desc(), MusicRelease.created_at.desc())

    # ---- read model ----

    @staticmethod
    async def list_active(
        db: AsyncSession,
        genre: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[MusicRelease]:
        """Active releases, newest first, optionally narrowed to one genre."""
        query = select(MusicRelease).where(MusicRelease.is_active.is_(True))
        if genre:
            query = query.where(MusicRelease.genre == genre)
        query = query.order_by(MusicRelease.release_date.desc(), MusicRelease.created_at.desc())
        if limit:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def list_active_for_artist(db: AsyncSession, artist_id: uuid.UUID) -> list[MusicRelease]:
        """Active releases linked to one roster artist, newest first."""
        result = await db.execute(
            select(MusicRelease)
            .where(MusicRelease.is_active.is_(True), MusicRelease.artist_id == artist_id)
            .order_by(MusicRelease.release_date.desc(), MusicRelease.created_at.desc())
        )
        return list(result.scalars().all())

    # ---- write model ----

    @staticmethod
    async def _linked_artist(db: AsyncSession, artist_id: uuid.UUID) -> Optional[Artist]:
        return await db.get(Artist, artist_id)

    @classmethod
    async def create(cls, db: AsyncSession, data: ReleaseCreate) -> MusicRelease:
        values = data.model_dump()

        if values["artist_id"] is not None:
            artist = await cls._linked_artist(db, values["artist_id"])
            if artist is None:
                raise FieldValidationException("artist_id", "Artist not found")
            values["artist_name"] = artist.name

        if values["release_date"] is None:
            values["release_date"] = date.today()

        release = await cls.save(db, MusicRelease(**values))
        logger.info(f"Created release {release.id} ({release.title})")
        return release

    @classmethod
    async def update(cls, db: AsyncSession, release_id: uuid.UUID, data: ReleaseUpdate) -> MusicRelease:
        """
        Partial update.

        When the release ends up linked to an artist, artist_name is
        re-copied from that artist's current name. Renaming an artist does
        not touch its releases until they are saved again.
        """
        release = await cls.get(db, release_id)
        changes = data.model_dump(exclude_unset=True)

        artist_id = changes["artist_id"] if "artist_id" in changes else release.artist_id
        if artist_id is not None:
            artist = await cls._linked_artist(db, artist_id)
            if artist is not None:
                changes["artist_name"] = artist.name
            elif "artist_id" in changes:
                raise FieldValidationException("artist_id", "Artist not found")

        cls.apply_changes(release, changes)
        return await cls.save(db, release)
