import logging
import uuid
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.models.demo import DemoSubmission, STATUS_PENDING
from hypehouse.schemas.demo import DemoSubmissionCreate
from hypehouse.services.content_service import ContentService

logger = logging.getLogger(__name__)

STATUS_ALL = "all"


class DemoService(ContentService[DemoSubmission]):
    model = DemoSubmission
    label = "Submission"

    @classmethod
    def admin_order(cls) -> tuple:
        return (DemoSubmission.created_at.desc(),)

    @staticmethod
    async def submit(db: AsyncSession, data: DemoSubmissionCreate) -> None:
        """
        Store a public demo submission.

        Plain INSERT without RETURNING: anonymous callers may insert into
        demo_submissions but cannot read it back.
        """
        await db.execute(
            insert(DemoSubmission).values(
                id=uuid.uuid4(),
                artist_name=data.artist_name,
                email=data.email,
                genre=data.genre,
                music_link=data.music_link,
                bio=data.bio,
                social_link=data.social_link,
                status=STATUS_PENDING,
            )
        )
        await db.commit()
        logger.info(f"Received demo submission from {data.artist_name}")

    @staticmethod
    async def list_by_status(db: AsyncSession, status: Optional[str] = STATUS_ALL) -> list[DemoSubmission]:
        query = select(DemoSubmission)
        if status and status != STATUS_ALL:
            query = query.where(DemoSubmission.status == status)
        result = await db.execute(query.order_by(DemoSubmission.created_at.desc()))
        return list(result.scalars().all())

    @classmethod
    async def update_status(cls, db: AsyncSession, submission_id: uuid.UUID, status: str) -> DemoSubmission:
        submission = await cls.get(db, submission_id)
        submission.status = status
        submission = await cls.save(db, submission)
        logger.info(f"Submission {submission_id} marked {status}")
        return submission

    @classmethod
    async def update_notes(
        cls,
        db: AsyncSession,
        submission_id: uuid.UUID,
        admin_notes: Optional[str],
    ) -> DemoSubmission:
        submission = await cls.get(db, submission_id)
        submission.admin_notes = admin_notes
        return await cls.save(db, submission)
