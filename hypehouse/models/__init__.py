# Import all models so Alembic can detect them
from hypehouse.models.user import User, UserRole
from hypehouse.models.artist import Artist
from hypehouse.models.release import MusicRelease
from hypehouse.models.event import Event
from hypehouse.models.promo import PromoSlide
from hypehouse.models.demo import DemoSubmission

__all__ = [
    "User",
    "UserRole",
    "Artist",
    "MusicRelease",
    "Event",
    "PromoSlide",
    "DemoSubmission",
]
