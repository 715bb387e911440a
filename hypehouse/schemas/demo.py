import uuid
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from hypehouse.schemas.common import AbsoluteUrl, blank_to_none

DEMO_GENRES = (
    "Hip-Hop",
    "R&B",
    "Pop",
    "Electronic / Dance",
    "Rock",
    "Alternative",
    "Soul / Funk",
    "Jazz",
    "Afrobeats",
    "Latin",
    "Other",
)

DemoStatus = Literal["pending", "reviewed", "accepted", "rejected"]


class DemoSubmissionCreate(BaseModel):
    """
    Public demo form (`/submit`).

    Wire names are camelCase (artistName, musicLink, socialLink); snake_case
    is accepted too. There is deliberately no status field: new
    submissions always start as pending.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    artist_name: str = Field(
        ..., alias="artistName", min_length=2, max_length=100,
    )
    email: EmailStr
    genre: str
    music_link: AbsoluteUrl = Field(..., alias="musicLink")
    bio: str = Field(..., min_length=50, max_length=1000)
    social_link: Optional[AbsoluteUrl] = Field(None, alias="socialLink")

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("Email too long")
        return v

    @field_validator("genre")
    @classmethod
    def known_genre(cls, v: str) -> str:
        if v not in DEMO_GENRES:
            raise ValueError("Please select a genre")
        return v

    @field_validator("social_link", mode="before")
    @classmethod
    def empty_social_link(cls, v):
        return blank_to_none(v)


class DemoStatusUpdate(BaseModel):
    status: DemoStatus


class DemoNotesUpdate(BaseModel):
    admin_notes: Optional[str] = Field(None, max_length=5000)


class DemoSubmissionResponse(BaseModel):
    id: uuid.UUID
    artist_name: str
    email: str
    genre: str
    music_link: str
    bio: Optional[str] = None
    social_link: Optional[str] = None
    status: DemoStatus
    admin_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
