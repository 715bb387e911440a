from fastapi import APIRouter, status

from hypehouse.dependencies import DbSession
from hypehouse.schemas.common import SubmissionResult
from hypehouse.schemas.demo import DemoSubmissionCreate, DEMO_GENRES
from hypehouse.services.demo_service import DemoService

router = APIRouter()


@router.get(
    "/genres",
    response_model=list[str],
    summary="Genres accepted by the demo form",
)
async def list_demo_genres():
    return list(DEMO_GENRES)


@router.post(
    "",
    response_model=SubmissionResult,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a demo",
)
async def submit_demo(request: DemoSubmissionCreate, db: DbSession):
    """
    Submit a demo for A&R review.

    - **artistName**: 2-100 characters
    - **email**: Valid email address
    - **genre**: One of `/submit/genres`
    - **musicLink**: Link to the music (absolute URL)
    - **bio**: 50-1000 characters
    - **socialLink**: Optional absolute URL
    """
    await DemoService.submit(db, request)
    return SubmissionResult(
        success=True,
        message="Demo submitted successfully! We'll be in touch.",
    )
