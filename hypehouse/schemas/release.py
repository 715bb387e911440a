import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hypehouse.schemas.common import OptionalLink


class ReleaseCreate(BaseModel):
    """Release form. Either artist_id (roster artist) or artist_name (free text)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    artist_id: Optional[uuid.UUID] = None
    artist_name: Optional[str] = Field(None, max_length=255)
    cover_url: OptionalLink = None
    release_date: Optional[date] = None
    genre: Optional[str] = Field(None, max_length=100)
    spotify_url: OptionalLink = None
    apple_music_url: OptionalLink = None
    soundcloud_url: OptionalLink = None
    download_url: OptionalLink = None
    is_featured: bool = False
    is_active: bool = True

    @field_validator("artist_id", "artist_name", "genre", "release_date", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def artist_present(self):
        if self.artist_id is None and not self.artist_name:
            raise ValueError("Select a roster artist or enter an artist name")
        return self


class ReleaseUpdate(BaseModel):
    """Partial release update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    artist_id: Optional[uuid.UUID] = None
    artist_name: Optional[str] = Field(None, min_length=1, max_length=255)
    cover_url: OptionalLink = None
    release_date: Optional[date] = None
    genre: Optional[str] = Field(None, max_length=100)
    spotify_url: OptionalLink = None
    apple_music_url: OptionalLink = None
    soundcloud_url: OptionalLink = None
    download_url: OptionalLink = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("artist_id", "genre", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("title", "artist_name", "release_date", "is_featured", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ReleaseResponse(BaseModel):
    id: uuid.UUID
    title: str
    artist_id: Optional[uuid.UUID] = None
    artist_name: str
    cover_url: Optional[str] = None
    release_date: date
    genre: Optional[str] = None
    spotify_url: Optional[str] = None
    apple_music_url: Optional[str] = None
    soundcloud_url: Optional[str] = None
    download_url: Optional[str] = None
    is_featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
