from fastapi import APIRouter, Query

from hypehouse.dependencies import DbSession
from hypehouse.schemas.promo import PromoSlideResponse, Zone
from hypehouse.services.promo_service import PromoService

router = APIRouter()


@router.get(
    "",
    response_model=list[PromoSlideResponse],
    summary="List promo slides for a zone",
)
async def list_promo_slides(
    db: DbSession,
    zone: Zone = Query(..., description="Page zone: top or bottom"),
):
    """Active slides for the zone in rotation order. An empty list means render nothing."""
    slides = await PromoService.list_for_zone(db, zone)
    return [PromoSlideResponse.model_validate(s) for s in slides]
