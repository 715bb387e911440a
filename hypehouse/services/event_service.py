import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.models.event import Event
from hypehouse.schemas.event import EventCreate, EventUpdate
from hypehouse.services.content_service import ActiveToggleMixin, ContentService, FeaturedToggleMixin

logger = logging.getLogger(__name__)

PLACEHOLDER_EVENT = {
    "title": "Event",
    "venue": "TBA",
    "location": "TBA",
    "description": "More details coming soon.",
    "ticket_price": "TBA",
    "is_placeholder": True,
}


def as_utc(moment: datetime) -> datetime:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def is_past(event: Event, now: datetime) -> bool:
    return as_utc(event.event_date) < as_utc(now)


@dataclass
class EventPartition:
    upcoming: list[Event] = field(default_factory=list)
    past: list[Event] = field(default_factory=list)
    featured: Optional[Event] = None


def partition_events(events: list[Event], now: datetime) -> EventPartition:
    """
    Split events (already ordered by event_date) around `now`.

    An event exactly at `now` counts as upcoming. The featured slot is the
    first upcoming event flagged is_featured, else the earliest upcoming one.
    """
    partition = EventPartition()
    for event in events:
        if is_past(event, now):
            partition.past.append(event)
        else:
            partition.upcoming.append(event)

    featured = next((e for e in partition.upcoming if e.is_featured), None)
    if featured is None and partition.upcoming:
        featured = partition.upcoming[0]
    partition.featured = featured
    return partition


class EventService(ActiveToggleMixin, FeaturedToggleMixin, ContentService[Event]):
    model = Event
    label = "Event"

    @classmethod
    def admin_order(cls) -> tuple:
        return (Event.event_date.asc(),)

    # ---- read model ----

    @staticmethod
    async def list_active(db: AsyncSession) -> list[Event]:
        result = await db.execute(
            select(Event).where(Event.is_active.is_(True)).order_by(Event.event_date.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def list_partitioned(db: AsyncSession, now: Optional[datetime] = None) -> EventPartition:
        """Re-evaluated on every call, so an event crossing `now` moves to past on the next query."""
        events = await EventService.list_active(db)
        return partition_events(events, now or datetime.now(timezone.utc))

    @staticmethod
    async def get_active(db: AsyncSession, event_id: uuid.UUID) -> Optional[Event]:
        result = await db.execute(
            select(Event).where(Event.id == event_id, Event.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    # ---- write model ----

    @classmethod
    async def create(cls, db: AsyncSession, data: EventCreate) -> Event:
        event = await cls.save(db, Event(**data.model_dump()))
        logger.info(f"Created event {event.id} ({event.title})")
        return event

    @classmethod
    async def update(cls, db: AsyncSession, event_id: uuid.UUID, data: EventUpdate) -> Event:
        event = await cls.get(db, event_id)
        cls.apply_changes(event, data.model_dump(exclude_unset=True))
        return await cls.save(db, event)
