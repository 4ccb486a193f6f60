"""
Booking API - Intake Submission Service
========================================

What:  Stores requester-supplied intake data and finds the next one to link.
Who:   Called by POST /data, GET /api/latestdata and GET /getData.

An admin UI polls /api/latestdata for the newest submission that has not yet
been attached to a booked slot, then books via POST /api/slots/book.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.exceptions import DatabaseError, NotFoundError
from bookingapi.models.intake import IntakeSubmission
from bookingapi.schemas.intake import IntakeCreate, IntakeResponse

logger = logging.getLogger(__name__)


class IntakeService:

    async def create_submission(self, db: AsyncSession, payload: IntakeCreate) -> IntakeSubmission:
        submission = IntakeSubmission(
            name=payload.name,
            phone=payload.phone,
            date=payload.date,
            time=payload.time,
            mode=payload.mode,
            email=payload.email,
            is_submitted=payload.is_submitted,
        )
        try:
            db.add(submission)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving submission: %s", str(e), exc_info=True)
            raise DatabaseError(message="An error occurred", context={"error_type": type(e).__name__})

        logger.info("Intake submission saved: %s (%s)", submission.id, submission.mode)
        return submission

    async def latest_unsubmitted(self, db: AsyncSession) -> IntakeResponse:
        """
        Newest submission with is_submitted = False.

        Raises:
            NotFoundError: every submission is already linked (→ 404)
        """
        try:
            result = await db.execute(
                select(IntakeSubmission)
                .where(IntakeSubmission.is_submitted.is_(False))
                .order_by(IntakeSubmission.created_at.desc(), IntakeSubmission.id.desc())
                .limit(1)
            )
            submission = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching latest submission: %s", str(e), exc_info=True)
            raise DatabaseError(message="An error occurred", context={"error_type": type(e).__name__})

        if submission is None:
            raise NotFoundError(resource="Data", message="No data found")
        return IntakeResponse.model_validate(submission)

    async def list_submissions(self, db: AsyncSession) -> List[IntakeResponse]:
        """Every submission in insertion order; no filtering, no pagination."""
        try:
            result = await db.execute(
                select(IntakeSubmission).order_by(IntakeSubmission.created_at, IntakeSubmission.id)
            )
            submissions = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing submissions: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        return [IntakeResponse.model_validate(s) for s in submissions]


intake_service = IntakeService()
