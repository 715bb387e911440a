"""Schemas for the landing page and the admin dashboard."""

from pydantic import BaseModel

from hypehouse.schemas.artist import PublicArtistResponse
from hypehouse.schemas.event import PublicEventResponse
from hypehouse.schemas.promo import PromoSlideResponse
from hypehouse.schemas.release import ReleaseResponse


class HomeResponse(BaseModel):
    """Everything the home page sections render."""
    top_slides: list[PromoSlideResponse]
    bottom_slides: list[PromoSlideResponse]
    featured_artists: list[PublicArtistResponse]
    latest_releases: list[ReleaseResponse]
    upcoming_events: list[PublicEventResponse]


class DashboardResponse(BaseModel):
    """Counts shown on the admin dashboard cards."""
    promo_slides: int
    artists: int
    music_releases: int
    events: int
    demo_submissions: int
    pending_demos: int
