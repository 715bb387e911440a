import uuid
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hypehouse.schemas.common import OptionalLink

Position = Literal["top", "bottom", "both"]
Zone = Literal["top", "bottom"]


class PromoSlideCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    image_url: str = Field(..., min_length=1, max_length=500)
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: Optional[str] = Field(None, max_length=500)
    link: OptionalLink = None
    position: Position = "both"
    display_order: int = 0
    is_active: bool = True

    @field_validator("subtitle", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PromoSlideUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    image_url: Optional[str] = Field(None, min_length=1, max_length=500)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subtitle: Optional[str] = Field(None, max_length=500)
    link: OptionalLink = None
    position: Optional[Position] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("image_url", "title", "position", "display_order", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("subtitle", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PromoSlideResponse(BaseModel):
    id: uuid.UUID
    image_url: str
    title: str
    subtitle: Optional[str] = None
    link: Optional[str] = None
    position: Position
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
