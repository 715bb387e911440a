"""Artist schemas for the admin CMS and public pages."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hypehouse.core.slugs import is_valid_slug
from hypehouse.schemas.common import OptionalLink, OptionalText
from hypehouse.schemas.release import ReleaseResponse


def _check_slug(value: Optional[str]) -> Optional[str]:
    # None/"" means "derive from name"
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not is_valid_slug(value):
        raise ValueError("Slug may only contain lowercase letters, numbers and single hyphens")
    return value


class ArtistCreate(BaseModel):
    """Artist form submitted from the admin screen."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    bio: OptionalText = None
    short_bio: Optional[str] = Field(None, max_length=500)
    image_url: OptionalLink = None
    genre: Optional[str] = Field(None, max_length=100)
    spotify_url: OptionalLink = None
    soundcloud_url: OptionalLink = None
    instagram_url: OptionalLink = None
    youtube_url: OptionalLink = None
    is_featured: bool = False
    is_active: bool = True

    @field_validator("slug")
    @classmethod
    def slug_format(cls, v: Optional[str]) -> Optional[str]:
        return _check_slug(v)

    @field_validator("short_bio", "genre", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ArtistUpdate(BaseModel):
    """Partial artist update. Only fields present in the payload are written."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    bio: OptionalText = None
    short_bio: Optional[str] = Field(None, max_length=500)
    image_url: OptionalLink = None
    genre: Optional[str] = Field(None, max_length=100)
    spotify_url: OptionalLink = None
    soundcloud_url: OptionalLink = None
    instagram_url: OptionalLink = None
    youtube_url: OptionalLink = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_featured", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("slug")
    @classmethod
    def slug_format(cls, v: Optional[str]) -> Optional[str]:
        return _check_slug(v)

    @field_validator("short_bio", "genre", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ArtistResponse(BaseModel):
    """Full artist row as the admin screen sees it."""
    id: uuid.UUID
    name: str
    slug: str
    bio: Optional[str] = None
    short_bio: Optional[str] = None
    image_url: Optional[str] = None
    genre: Optional[str] = None
    spotify_url: Optional[str] = None
    soundcloud_url: Optional[str] = None
    instagram_url: Optional[str] = None
    youtube_url: Optional[str] = None
    is_featured: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PublicArtistResponse(BaseModel):
    """Artist as rendered on public pages; may be the generic placeholder."""
    id: Optional[uuid.UUID] = None
    name: str
    slug: str
    bio: Optional[str] = None
    short_bio: Optional[str] = None
    image_url: Optional[str] = None
    genre: Optional[str] = None
    spotify_url: Optional[str] = None
    soundcloud_url: Optional[str] = None
    instagram_url: Optional[str] = None
    youtube_url: Optional[str] = None
    is_featured: bool = False
    is_placeholder: bool = False
    releases: list[ReleaseResponse] = []

    model_config = {"from_attributes": True}


class ArtistOption(BaseModel):
    """Artist entry for the release form's artist dropdown."""
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}
