import uuid

from fastapi import APIRouter, Depends, status

from hypehouse.dependencies import DbSession, get_admin_user, require_confirmation
from hypehouse.schemas.artist import ArtistOption
from hypehouse.schemas.common import MessageResponse
from hypehouse.schemas.release import ReleaseCreate, ReleaseUpdate, ReleaseResponse
from hypehouse.services.artist_service import ArtistService
from hypehouse.services.release_service import ReleaseService

router = APIRouter(dependencies=[Depends(get_admin_user)])


@router.get(
    "",
    response_model=list[ReleaseResponse],
    summary="List all releases",
)
async def list_releases(db: DbSession):
    """Every release, including inactive ones, newest release_date first."""
    return await ReleaseService.list_all(db)


@router.get(
    "/artist-options",
    response_model=list[ArtistOption],
    summary="Artists for the release form",
)
async def list_artist_options(db: DbSession):
    """Active roster artists (id, name) ordered by name."""
    return await ArtistService.artist_options(db)


@router.post(
    "",
    response_model=ReleaseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create release",
)
async def create_release(request: ReleaseCreate, db: DbSession):
    """
    Create a release.

    - **title**: Required
    - **artist_id** or **artist_name**: One is required; a linked artist's
      name is copied into artist_name
    - **release_date**: Defaults to today
    """
    return await ReleaseService.create(db, request)


@router.get(
    "/{release_id}",
    response_model=ReleaseResponse,
    summary="Get release",
)
async def get_release(release_id: uuid.UUID, db: DbSession):
    return await ReleaseService.get(db, release_id)


@router.patch(
    "/{release_id}",
    response_model=ReleaseResponse,
    summary="Update release",
)
async def update_release(release_id: uuid.UUID, request: ReleaseUpdate, db: DbSession):
    """Partial update. Saving a linked release refreshes its artist_name."""
    return await ReleaseService.update(db, release_id, request)


@router.post(
    "/{release_id}/toggle-active",
    response_model=ReleaseResponse,
    summary="Show or hide release",
)
async def toggle_release_active(release_id: uuid.UUID, db: DbSession):
    return await ReleaseService.toggle_active(db, release_id)


@router.post(
    "/{release_id}/toggle-featured",
    response_model=ReleaseResponse,
    summary="Feature or unfeature release",
)
async def toggle_release_featured(release_id: uuid.UUID, db: DbSession):
    return await ReleaseService.toggle_featured(db, release_id)


@router.delete(
    "/{release_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_confirmation)],
    summary="Delete release",
)
async def delete_release(release_id: uuid.UUID, db: DbSession):
    await ReleaseService.remove(db, release_id)
    return MessageResponse(message="Release removed")
