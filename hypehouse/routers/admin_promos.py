import uuid

from fastapi import APIRouter, Depends, status

from hypehouse.dependencies import DbSession, get_admin_user, require_confirmation
from hypehouse.schemas.common import MessageResponse
from hypehouse.schemas.promo import PromoSlideCreate, PromoSlideUpdate, PromoSlideResponse
from hypehouse.services.promo_service import PromoService

router = APIRouter(dependencies=[Depends(get_admin_user)])


@router.get(
    "",
    response_model=list[PromoSlideResponse],
    summary="List all promo slides",
)
async def list_promo_slides(db: DbSession):
    """Every slide, including inactive ones, in display order."""
    return await PromoService.list_all(db)


@router.post(
    "",
    response_model=PromoSlideResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create promo slide",
)
async def create_promo_slide(request: PromoSlideCreate, db: DbSession):
    """
    Create a promo slide.

    - **image_url**, **title**: Required
    - **position**: top, bottom or both (default both)
    - **display_order**: Rotation order within a zone (default 0)
    """
    return await PromoService.create(db, request)


@router.get(
    "/{slide_id}",
    response_model=PromoSlideResponse,
    summary="Get promo slide",
)
async def get_promo_slide(slide_id: uuid.UUID, db: DbSession):
    return await PromoService.get(db, slide_id)


@router.patch(
    "/{slide_id}",
    response_model=PromoSlideResponse,
    summary="Update promo slide",
)
async def update_promo_slide(slide_id: uuid.UUID, request: PromoSlideUpdate, db: DbSession):
    return await PromoService.update(db, slide_id, request)


@router.post(
    "/{slide_id}/toggle-active",
    response_model=PromoSlideResponse,
    summary="Show or hide promo slide",
)
async def toggle_promo_slide_active(slide_id: uuid.UUID, db: DbSession):
    return await PromoService.toggle_active(db, slide_id)


@router.delete(
    "/{slide_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_confirmation)],
    summary="Delete promo slide",
)
async def delete_promo_slide(slide_id: uuid.UUID, db: DbSession):
    await PromoService.remove(db, slide_id)
    return MessageResponse(message="Promo slide removed")
