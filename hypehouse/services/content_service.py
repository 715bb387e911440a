"""
Shared admin CRUD for the content tables.

Each entity service names its model and admin ordering; create/update
(which carry the entity-specific rules) live on the subclasses.
Flag toggles are mixins, mixed in only by services whose model has the flag.
"""
import logging
import uuid
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.core.exceptions import NotFoundException
from hypehouse.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ContentService(Generic[ModelT]):
    model: ClassVar[type]
    label: ClassVar[str] = "Item"

    @classmethod
    def admin_order(cls) -> tuple:
        return ()

    @classmethod
    async def get(cls, db: AsyncSession, item_id: uuid.UUID) -> ModelT:
        """Fetch by id for admin screens; a missing row is a visible 404."""
        item = await db.get(cls.model, item_id)
        if item is None:
            raise NotFoundException(f"{cls.label} not found")
        return item

    @classmethod
    async def list_all(cls, db: AsyncSession) -> list[ModelT]:
        """Admin listing: every row, active or not."""
        result = await db.execute(select(cls.model).order_by(*cls.admin_order()))
        return list(result.scalars().all())

    @classmethod
    async def save(cls, db: AsyncSession, item: ModelT) -> ModelT:
        db.add(item)
        await db.commit()
        await db.refresh(item)
        return item

    @staticmethod
    def apply_changes(item: ModelT, changes: dict[str, Any]) -> None:
        changes.pop("id", None)
        for field, value in changes.items():
            setattr(item, field, value)

    @classmethod
    async def remove(cls, db: AsyncSession, item_id: uuid.UUID) -> None:
        """Hard delete. Nothing else is touched by the application."""
        item = await cls.get(db, item_id)
        await db.delete(item)
        await db.commit()
        logger.info(f"Deleted {cls.label.lower()} {item_id}")


class ActiveToggleMixin:
    """For entities with an is_active flag (hidden from public reads when false)."""

    @classmethod
    async def toggle_active(cls, db: AsyncSession, item_id: uuid.UUID):
        item = await cls.get(db, item_id)
        item.is_active = not item.is_active
        return await cls.save(db, item)


class FeaturedToggleMixin:
    """For entities with an is_featured flag."""

    @classmethod
    async def toggle_featured(cls, db: AsyncSession, item_id: uuid.UUID):
        item = await cls.get(db, item_id)
        item.is_featured = not item.is_featured
        return await cls.save(db, item)
