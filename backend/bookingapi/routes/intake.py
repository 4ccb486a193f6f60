"""
Booking API - Intake ("Data") Route Handlers
=============================================

Route Inventory:
    POST /data             save an intake submission (200)
    GET  /api/latestdata   newest submission not yet linked to a slot
    GET  /getData          every submission

The paths are irregular because existing frontends call them as-is.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.database import get_db_session
from bookingapi.schemas.common import ErrorResponse, MessageResponse
from bookingapi.schemas.intake import IntakeCreate, IntakeResponse
from bookingapi.services.intake_service import intake_service

router = APIRouter(tags=["Intake"])


@router.post(
    "/data",
    response_model=MessageResponse,
    responses={400: {"description": "Missing required field", "model": ErrorResponse}},
    summary="Save an intake submission",
)
async def create_submission(
    payload: IntakeCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await intake_service.create_submission(db, payload)
    return MessageResponse(message="Data saved successfully")


@router.get(
    "/api/latestdata",
    response_model=IntakeResponse,
    responses={404: {"description": "No unsubmitted data", "model": ErrorResponse}},
    summary="Newest submission not yet linked to a slot",
)
async def latest_submission(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> IntakeResponse:
    return await intake_service.latest_unsubmitted(db)


@router.get(
    "/getData",
    response_model=List[IntakeResponse],
    summary="List every intake submission",
)
async def list_submissions(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[IntakeResponse]:
    return await intake_service.list_submissions(db)
