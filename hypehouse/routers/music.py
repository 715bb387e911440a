from typing import Optional

from fastapi import APIRouter, Query

from hypehouse.dependencies import DbSession
from hypehouse.schemas.release import ReleaseResponse
from hypehouse.services.release_service import ReleaseService

router = APIRouter()


@router.get(
    "",
    response_model=list[ReleaseResponse],
    summary="List releases",
)
async def list_music_releases(
    db: DbSession,
    genre: Optional[str] = Query(None, description="Only releases of this genre"),
):
    """Active releases, newest release_date first."""
    releases = await ReleaseService.list_active(db, genre=genre)
    return [ReleaseResponse.model_validate(r) for r in releases]
