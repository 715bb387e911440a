import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hypehouse.schemas.common import OptionalLink, OptionalText


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # The admin form's datetime-local input carries no offset
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class EventCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: OptionalText = None
    venue: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    event_date: datetime
    image_url: OptionalLink = None
    ticket_url: OptionalLink = None
    ticket_price: Optional[str] = Field(None, max_length=100)
    is_featured: bool = False
    is_active: bool = True

    @field_validator("event_date")
    @classmethod
    def event_date_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_validator("ticket_price", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EventUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: OptionalText = None
    venue: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    event_date: Optional[datetime] = None
    image_url: OptionalLink = None
    ticket_url: OptionalLink = None
    ticket_price: Optional[str] = Field(None, max_length=100)
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("title", "venue", "location", "event_date", "is_featured", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        if isinstance(v, datetime):
            return _as_utc(v)
        return v

    @field_validator("ticket_price", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EventResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    venue: str
    location: str
    event_date: datetime
    image_url: Optional[str] = None
    ticket_url: Optional[str] = None
    ticket_price: Optional[str] = None
    is_featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PublicEventResponse(BaseModel):
    """Event as rendered on public pages; may be the generic placeholder."""
    id: Optional[uuid.UUID] = None
    title: str
    description: Optional[str] = None
    venue: str
    location: str
    event_date: Optional[datetime] = None
    image_url: Optional[str] = None
    ticket_url: Optional[str] = None
    ticket_price: Optional[str] = None
    is_featured: bool = False
    is_past: bool = False
    is_placeholder: bool = False

    model_config = {"from_attributes": True}


class EventListResponse(BaseModel):
    """Events page payload, partitioned against the time of the request."""
    featured: Optional[PublicEventResponse] = None
    upcoming: list[PublicEventResponse]
    past: list[PublicEventResponse]
