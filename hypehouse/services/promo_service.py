import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.models.promo import PromoSlide, POSITION_BOTH
from hypehouse.schemas.promo import PromoSlideCreate, PromoSlideUpdate
from hypehouse.services.content_service import ActiveToggleMixin, ContentService

logger = logging.getLogger(__name__)


class PromoService(ActiveToggleMixin, ContentService[PromoSlide]):
    model = PromoSlide
    label = "Promo slide"

    @classmethod
    def admin_order(cls) -> tuple:
        return (PromoSlide.display_order.asc(), PromoSlide.created_at.asc())

    @staticmethod
    async def list_for_zone(db: AsyncSession, zone: str) -> list[PromoSlide]:
        """
        Active slides allowed in a page zone ("top" or "bottom").

        Slides positioned "both" show in either zone. Rotation order is
        display_order, ties going to the older slide.
        """
        result = await db.execute(
            select(PromoSlide)
            .where(
                PromoSlide.is_active.is_(True),
                PromoSlide.position.in_((zone, POSITION_BOTH)),
            )
            .order_by(PromoSlide.display_order.asc(), PromoSlide.created_at.asc())
        )
        return list(result.scalars().all())

    @classmethod
    async def create(cls, db: AsyncSession, data: PromoSlideCreate) -> PromoSlide:
        slide = await cls.save(db, PromoSlide(**data.model_dump()))
        logger.info(f"Created promo slide {slide.id} ({slide.position})")
        return slide

    @classmethod
    async def update(cls, db: AsyncSession, slide_id: uuid.UUID, data: PromoSlideUpdate) -> PromoSlide:
        slide = await cls.get(db, slide_id)
        cls.apply_changes(slide, data.model_dump(exclude_unset=True))
        return await cls.save(db, slide)
