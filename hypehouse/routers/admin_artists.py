import uuid

from fastapi import APIRouter, Depends, status

from hypehouse.dependencies import DbSession, get_admin_user, require_confirmation
from hypehouse.schemas.artist import ArtistCreate, ArtistUpdate, ArtistResponse
from hypehouse.schemas.common import MessageResponse
from hypehouse.services.artist_service import ArtistService

router = APIRouter(dependencies=[Depends(get_admin_user)])


@router.get(
    "",
    response_model=list[ArtistResponse],
    summary="List all artists",
)
async def list_artists(db: DbSession):
    """Every artist, including inactive ones, ordered by name."""
    return await ArtistService.list_all(db)


@router.post(
    "",
    response_model=ArtistResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create artist",
)
async def create_artist(request: ArtistCreate, db: DbSession):
    """
    Create an artist.

    - **name**: Required
    - **slug**: Optional; derived from the name when empty
    """
    return await ArtistService.create(db, request)


@router.get(
    "/{artist_id}",
    response_model=ArtistResponse,
    summary="Get artist",
)
async def get_artist(artist_id: uuid.UUID, db: DbSession):
    return await ArtistService.get(db, artist_id)


@router.patch(
    "/{artist_id}",
    response_model=ArtistResponse,
    summary="Update artist",
)
async def update_artist(artist_id: uuid.UUID, request: ArtistUpdate, db: DbSession):
    """Partial update; only the fields sent are changed."""
    return await ArtistService.update(db, artist_id, request)


@router.post(
    "/{artist_id}/toggle-active",
    response_model=ArtistResponse,
    summary="Show or hide artist",
)
async def toggle_artist_active(artist_id: uuid.UUID, db: DbSession):
    return await ArtistService.toggle_active(db, artist_id)


@router.post(
    "/{artist_id}/toggle-featured",
    response_model=ArtistResponse,
    summary="Feature or unfeature artist",
)
async def toggle_artist_featured(artist_id: uuid.UUID, db: DbSession):
    return await ArtistService.toggle_featured(db, artist_id)


@router.delete(
    "/{artist_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_confirmation)],
    summary="Delete artist",
)
async def delete_artist(artist_id: uuid.UUID, db: DbSession):
    """
    Permanently delete an artist.

    Releases linked to the artist stay; their artist_name is kept and the
    link is cleared by the database.
    """
    await ArtistService.remove(db, artist_id)
    return MessageResponse(message="Artist removed")
