import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.core.exceptions import ConflictException, FieldValidationException
from hypehouse.core.slugs import generate_slug
from hypehouse.models.artist import Artist
from hypehouse.schemas.artist import ArtistCreate, ArtistUpdate
from hypehouse.services.content_service import ActiveToggleMixin, ContentService, FeaturedToggleMixin

logger = logging.getLogger(__name__)

PLACEHOLDER_ARTIST = {
    "name": "Artist",
    "slug": "artist",
    "genre": "Music",
    "short_bio": "Talented artist on the Hype House roster.",
    "bio": (
        "This artist is part of the Hype House Creative family. Check back soon "
        "for more information about their music and upcoming releases."
    ),
    "is_placeholder": True,
}


class ArtistService(ActiveToggleMixin, FeaturedToggleMixin, ContentService[Artist]):
    model = Artist
    label = "Artist"

    @classmethod
    def admin_order(cls) -> tuple:
        return (Artist.name.asc(),)

    # ---- read model ----

    @staticmethod
    async def list_active(db: AsyncSession) -> list[Artist]:
        result = await db.execute(
            select(Artist).where(Artist.is_active.is_(True)).order_by(Artist.name.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def list_featured(db: AsyncSession) -> list[Artist]:
        result = await db.execute(
            select(Artist)
            .where(Artist.is_active.is_(True), Artist.is_featured.is_(True))
            .order_by(Artist.name.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_active_by_slug(db: AsyncSession, slug: str) -> Optional[Artist]:
        result = await db.execute(
            select(Artist).where(Artist.slug == slug, Artist.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def artist_options(db: AsyncSession) -> list[Artist]:
        """Active roster for the release form's artist picker."""
        result = await db.execute(
            select(Artist).where(Artist.is_active.is_(True)).order_by(Artist.name.asc())
        )
        return list(result.scalars().all())

    # ---- write model ----

    @staticmethod
    async def _ensure_slug_available(
        db: AsyncSession,
        slug: str,
        exclude_id: Optional[uuid.UUID] = None,
    ) -> None:
        query = select(Artist.id).where(Artist.slug == slug)
        if exclude_id is not None:
            query = query.where(Artist.id != exclude_id)
        result = await db.execute(query)
        if result.first() is not None:
            raise ConflictException(f"Slug '{slug}' is already used by another artist")

    @staticmethod
    def _derive_slug(name: str) -> str:
        slug = generate_slug(name)
        if not slug:
            raise FieldValidationException(
                "name", "Name must contain at least one letter or number to build a slug"
            )
        return slug

    @classmethod
    async def create(cls, db: AsyncSession, data: ArtistCreate) -> Artist:
        values = data.model_dump()
        slug = values.pop("slug") or cls._derive_slug(values["name"])
        await cls._ensure_slug_available(db, slug)

        artist = Artist(slug=slug, **values)
        artist = await cls.save(db, artist)
        logger.info(f"Created artist {artist.id} ({artist.slug})")
        return artist

    @classmethod
    async def update(cls, db: AsyncSession, artist_id: uuid.UUID, data: ArtistUpdate) -> Artist:
        artist = await cls.get(db, artist_id)
        changes = data.model_dump(exclude_unset=True)

        if "slug" in changes:
            # An emptied slug field means "regenerate from the name"
            slug = changes["slug"] or cls._derive_slug(changes.get("name", artist.name))
            if slug != artist.slug:
                await cls._ensure_slug_available(db, slug, exclude_id=artist.id)
            changes["slug"] = slug

        cls.apply_changes(artist, changes)
        return await cls.save(db, artist)
