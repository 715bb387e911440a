"""Public roster pages."""

from fastapi import APIRouter

from hypehouse.dependencies import DbSession
from hypehouse.schemas.artist import PublicArtistResponse
from hypehouse.schemas.release import ReleaseResponse
from hypehouse.services.artist_service import ArtistService, PLACEHOLDER_ARTIST
from hypehouse.services.release_service import ReleaseService

router = APIRouter()


@router.get(
    "",
    response_model=list[PublicArtistResponse],
    summary="List roster artists",
)
async def list_artists(db: DbSession):
    """Active artists ordered by name."""
    artists = await ArtistService.list_active(db)
    return [PublicArtistResponse.model_validate(a) for a in artists]


@router.get(
    "/{slug}",
    response_model=PublicArtistResponse,
    summary="Get artist by slug",
)
async def get_artist(slug: str, db: DbSession):
    """
    Get an active artist for the artist page.

    Unknown or inactive slugs return a generic placeholder artist
    (`is_placeholder: true`, no releases) instead of a 404, so the page
    shell still renders. A real artist comes with its active releases,
    newest first.
    """
    artist = await ArtistService.get_active_by_slug(db, slug)
    if artist is None:
        return PublicArtistResponse(**PLACEHOLDER_ARTIST)
    response = PublicArtistResponse.model_validate(artist)
    response.releases = [
        ReleaseResponse.model_validate(r)
        for r in await ReleaseService.list_active_for_artist(db, artist.id)
    ]
    return response
