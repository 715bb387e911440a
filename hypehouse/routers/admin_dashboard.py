from fastapi import APIRouter, Depends
from sqlalchemy import select, func

from hypehouse.dependencies import DbSession, get_admin_user
from hypehouse.models.artist import Artist
from hypehouse.models.demo import DemoSubmission, STATUS_PENDING
from hypehouse.models.event import Event
from hypehouse.models.promo import PromoSlide
from hypehouse.models.release import MusicRelease
from hypehouse.schemas.home import DashboardResponse

router = APIRouter(dependencies=[Depends(get_admin_user)])


async def _count(db, model, *conditions) -> int:
    result = await db.execute(select(func.count()).select_from(model).where(*conditions))
    return result.scalar() or 0


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Get dashboard counts",
)
async def get_dashboard(db: DbSession):
    """Row counts for each CMS section, plus demos waiting for review."""
    return DashboardResponse(
        promo_slides=await _count(db, PromoSlide),
        artists=await _count(db, Artist),
        music_releases=await _count(db, MusicRelease),
        events=await _count(db, Event),
        demo_submissions=await _count(db, DemoSubmission),
        pending_demos=await _count(db, DemoSubmission, DemoSubmission.status == STATUS_PENDING),
    )
