"""
Booking API - Slot Route Handlers
==================================

What:  Slot creation, per-day listing and the two booking variants.

Route Inventory:
    POST /api/slots                  create a slot (201)
    GET  /api/slots?date=YYYY-MM-DD  slots of one day
    POST /api/slots/book             book a slot and link an intake submission
    PUT  /api/slots/book/{slot_id}   book a slot on its own
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.database import get_db_session
from bookingapi.schemas.common import ErrorResponse, MessageResponse
from bookingapi.schemas.slot import BookingRequest, BookingResponse, SlotCreate, SlotResponse
from bookingapi.services.slot_service import slot_service

router = APIRouter(prefix="/api/slots", tags=["Slots"])


@router.post(
    "",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Slot already exists or invalid body", "model": ErrorResponse},
    },
    summary="Create a slot",
)
async def create_slot(
    payload: SlotCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await slot_service.create_slot(db, payload)
    return MessageResponse(message="Slot added successfully")


@router.get(
    "",
    response_model=List[SlotResponse],
    responses={400: {"description": "Missing or invalid date", "model": ErrorResponse}},
    summary="List the slots of one day",
    description="Returns slots whose date lies in [date 00:00:00, date 23:59:59).",
)
async def list_slots(
    date: Optional[str] = Query(default=None, description="Calendar day, YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[SlotResponse]:
    return await slot_service.list_slots(db, date)


@router.post(
    "/book",
    response_model=BookingResponse,
    responses={
        400: {"description": "Slot is already booked", "model": ErrorResponse},
        404: {"description": "Slot or data not found", "model": ErrorResponse},
    },
    summary="Book a slot for an intake submission",
)
async def book_slot_with_submission(
    payload: BookingRequest,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BookingResponse:
    slot = await slot_service.book_slot(db, payload.slot_id, payload.data_id)
    return BookingResponse(slot=slot)


@router.put(
    "/book/{slot_id}",
    response_model=BookingResponse,
    responses={
        400: {"description": "Slot is already booked", "model": ErrorResponse},
        404: {"description": "Slot not found", "model": ErrorResponse},
    },
    summary="Book a slot",
)
async def book_slot(
    slot_id: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BookingResponse:
    slot = await slot_service.book_slot(db, slot_id)
    return BookingResponse(slot=slot)
