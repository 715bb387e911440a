import uuid
from datetime import datetime, timezone

from fastapi import APIRouter

from hypehouse.dependencies import DbSession
from hypehouse.models.event import Event
from hypehouse.schemas.event import EventListResponse, PublicEventResponse
from hypehouse.services.event_service import EventService, PLACEHOLDER_EVENT, is_past

router = APIRouter()


def _to_public(event: Event, now: datetime) -> PublicEventResponse:
    response = PublicEventResponse.model_validate(event)
    response.is_past = is_past(event, now)
    return response


@router.get(
    "",
    response_model=EventListResponse,
    summary="List events",
)
async def list_events(db: DbSession):
    """
    Active events split into upcoming and past at request time.

    `featured` is the first upcoming event flagged as featured, falling
    back to the next upcoming event.
    """
    now = datetime.now(timezone.utc)
    partition = await EventService.list_partitioned(db, now)

    return EventListResponse(
        featured=_to_public(partition.featured, now) if partition.featured else None,
        upcoming=[_to_public(e, now) for e in partition.upcoming],
        past=[_to_public(e, now) for e in partition.past],
    )


@router.get(
    "/{event_id}",
    response_model=PublicEventResponse,
    summary="Get event",
)
async def get_event(event_id: str, db: DbSession):
    """
    Get an active event for the event page.

    Unknown, inactive or malformed ids return a generic placeholder event
    (`is_placeholder: true`).
    """
    try:
        parsed_id = uuid.UUID(event_id)
    except ValueError:
        return PublicEventResponse(**PLACEHOLDER_EVENT)

    event = await EventService.get_active(db, parsed_id)
    if event is None:
        return PublicEventResponse(**PLACEHOLDER_EVENT)
    return _to_public(event, datetime.now(timezone.utc))
