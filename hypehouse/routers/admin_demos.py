import uuid
from typing import Literal

from fastapi import APIRouter, Depends, Query

from hypehouse.dependencies import DbSession, get_admin_user, require_confirmation
from hypehouse.schemas.common import MessageResponse
from hypehouse.schemas.demo import DemoNotesUpdate, DemoStatusUpdate, DemoSubmissionResponse
from hypehouse.services.demo_service import DemoService

router = APIRouter(dependencies=[Depends(get_admin_user)])

StatusFilter = Literal["all", "pending", "reviewed", "accepted", "rejected"]


@router.get(
    "",
    response_model=list[DemoSubmissionResponse],
    summary="List demo submissions",
)
async def list_submissions(
    db: DbSession,
    status: StatusFilter = Query("all", description="Only submissions with this status"),
):
    """Submissions newest first, optionally filtered by review status."""
    return await DemoService.list_by_status(db, status)


@router.get(
    "/{submission_id}",
    response_model=DemoSubmissionResponse,
    summary="Get demo submission",
)
async def get_submission(submission_id: uuid.UUID, db: DbSession):
    return await DemoService.get(db, submission_id)


@router.patch(
    "/{submission_id}/status",
    response_model=DemoSubmissionResponse,
    summary="Change review status",
)
async def update_submission_status(submission_id: uuid.UUID, request: DemoStatusUpdate, db: DbSession):
    return await DemoService.update_status(db, submission_id, request.status)


@router.patch(
    "/{submission_id}/notes",
    response_model=DemoSubmissionResponse,
    summary="Save admin notes",
)
async def update_submission_notes(submission_id: uuid.UUID, request: DemoNotesUpdate, db: DbSession):
    return await DemoService.update_notes(db, submission_id, request.admin_notes)


@router.delete(
    "/{submission_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_confirmation)],
    summary="Delete demo submission",
)
async def delete_submission(submission_id: uuid.UUID, db: DbSession):
    await DemoService.remove(db, submission_id)
    return MessageResponse(message="Submission removed")
