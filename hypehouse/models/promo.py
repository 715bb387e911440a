from typing import Optional

from sqlalchemy import String, Integer, Boolean, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin

POSITION_TOP = "top"
POSITION_BOTTOM = "bottom"
POSITION_BOTH = "both"


class PromoSlide(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Promo banner shown in the top and/or bottom slider zone."""

    __tablename__ = "promo_slides"

    image_url: Mapped[str] = mapped_column(String(500))
    title: Mapped[str] = mapped_column(String(255))
    subtitle: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    link: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    position: Mapped[str] = mapped_column(String(10), default=POSITION_BOTH)
    display_order: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    __table_args__ = (
        CheckConstraint("position IN ('top', 'bottom', 'both')", name="ck_promo_slides_position"),
    )

    def __repr__(self) -> str:
        return f"<PromoSlide {self.title} ({self.position})>"
