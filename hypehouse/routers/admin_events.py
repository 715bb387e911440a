import uuid

from fastapi import APIRouter, Depends, status

from hypehouse.dependencies import DbSession, get_admin_user, require_confirmation
from hypehouse.schemas.common import MessageResponse
from hypehouse.schemas.event import EventCreate, EventUpdate, EventResponse
from hypehouse.services.event_service import EventService

router = APIRouter(dependencies=[Depends(get_admin_user)])


@router.get(
    "",
    response_model=list[EventResponse],
    summary="List all events",
)
async def list_events(db: DbSession):
    """Every event, including inactive ones, soonest first."""
    return await EventService.list_all(db)


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
)
async def create_event(request: EventCreate, db: DbSession):
    """
    Create an event.

    - **title**, **venue**, **location**, **event_date**: Required
    - **ticket_price**: Free text, e.g. "£15" or "Sold Out"
    """
    return await EventService.create(db, request)


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    summary="Get event",
)
async def get_event(event_id: uuid.UUID, db: DbSession):
    return await EventService.get(db, event_id)


@router.patch(
    "/{event_id}",
    response_model=EventResponse,
    summary="Update event",
)
async def update_event(event_id: uuid.UUID, request: EventUpdate, db: DbSession):
    return await EventService.update(db, event_id, request)


@router.post(
    "/{event_id}/toggle-active",
    response_model=EventResponse,
    summary="Show or hide event",
)
async def toggle_event_active(event_id: uuid.UUID, db: DbSession):
    return await EventService.toggle_active(db, event_id)


@router.post(
    "/{event_id}/toggle-featured",
    response_model=EventResponse,
    summary="Feature or unfeature event",
)
async def toggle_event_featured(event_id: uuid.UUID, db: DbSession):
    return await EventService.toggle_featured(db, event_id)


@router.delete(
    "/{event_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_confirmation)],
    summary="Delete event",
)
async def delete_event(event_id: uuid.UUID, db: DbSession):
    await EventService.remove(db, event_id)
    return MessageResponse(message="Event removed")
