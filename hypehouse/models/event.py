from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from hypehouse.database import Base
from hypehouse.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Event(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Label event. Upcoming/past is derived from event_date at read time."""

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    venue: Mapped[str] = mapped_column(String(255))
    location: Mapped[str] = mapped_column(String(255))
    event_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    ticket_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    ticket_price: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)  # Free text, e.g. "Sold Out"

    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<Event {self.title} @ {self.venue}>"
