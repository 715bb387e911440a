from datetime import datetime, timezone

from fastapi import APIRouter, Query

from hypehouse.dependencies import DbSession
from hypehouse.models.promo import POSITION_TOP, POSITION_BOTTOM
from hypehouse.schemas.artist import PublicArtistResponse
from hypehouse.schemas.event import PublicEventResponse
from hypehouse.schemas.home import HomeResponse
from hypehouse.schemas.promo import PromoSlideResponse
from hypehouse.schemas.release import ReleaseResponse
from hypehouse.services.artist_service import ArtistService
from hypehouse.services.event_service import EventService
from hypehouse.services.promo_service import PromoService
from hypehouse.services.release_service import ReleaseService

router = APIRouter()


@router.get(
    "",
    response_model=HomeResponse,
    summary="Get home page sections",
)
async def get_home(
    db: DbSession,
    releases_limit: int = Query(6, ge=1, le=20, description="Number of releases to return"),
    events_limit: int = Query(3, ge=1, le=20, description="Number of upcoming events to return"),
):
    """
    Get everything the landing page renders.

    - Promo slides for the top and bottom slider zones
    - Featured roster artists
    - Latest active releases
    - Next upcoming events
    """
    now = datetime.now(timezone.utc)

    top_slides = await PromoService.list_for_zone(db, POSITION_TOP)
    bottom_slides = await PromoService.list_for_zone(db, POSITION_BOTTOM)
    featured_artists = await ArtistService.list_featured(db)
    latest_releases = await ReleaseService.list_active(db, limit=releases_limit)
    partition = await EventService.list_partitioned(db, now)

    return HomeResponse(
        top_slides=[PromoSlideResponse.model_validate(s) for s in top_slides],
        bottom_slides=[PromoSlideResponse.model_validate(s) for s in bottom_slides],
        featured_artists=[PublicArtistResponse.model_validate(a) for a in featured_artists],
        latest_releases=[ReleaseResponse.model_validate(r) for r in latest_releases],
        upcoming_events=[
            PublicEventResponse.model_validate(e)
            for e in partition.upcoming[:events_limit]
        ],
    )
