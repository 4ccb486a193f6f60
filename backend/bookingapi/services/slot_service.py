"""
Booking API - Slot Service
===========================

What:  Slot creation, per-day listing and booking.
Who:   Called by the /api/slots route handlers.

Booking Flow:
    ┌────────────┐    ┌────────────────┐    ┌──────────────────────────┐
    │ Load slot  │───▶│ Load submission│───▶│ UPDATE slots             │
    │ (404)      │    │ (404, paired)  │    │ SET is_booked = true     │
    └────────────┘    └────────────────┘    │ WHERE id = :id           │
                                            │   AND is_booked = false  │
                                            └────────────┬─────────────┘
                                                         │ rowcount == 0 → 400
                                                         ▼
                                            mark submission is_submitted

    The conditional UPDATE is the only write that decides who wins a slot.
    Concurrent requests serialize on the row; the loser sees zero affected
    rows and gets "Slot is already booked". Both writes of a paired booking
    share the request transaction, so neither persists without the other.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.exceptions import (
    BookingAPIError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bookingapi.models.intake import IntakeSubmission
from bookingapi.models.slot import Slot
from bookingapi.schemas.slot import SlotCreate, SlotResponse
from bookingapi.services._ids import parse_id

logger = logging.getLogger(__name__)

SLOT_EXISTS_MESSAGE = "Slot already exists for the given date and time"
ALREADY_BOOKED_MESSAGE = "Slot is already booked"


def day_window(day: str) -> tuple[datetime, datetime]:
    """
    Return the half-open window [day 00:00:00, day 23:59:59) for "YYYY-MM-DD".

    Raises:
        ValidationError: missing or unparseable day
    """
    if not day:
        raise ValidationError(message="Query parameter 'date' is required", field="date")
    try:
        parsed = date.fromisoformat(day.strip()[:10])
    except ValueError:
        raise ValidationError(
            message=f"Invalid date '{day}'. Expected YYYY-MM-DD",
            field="date",
        )
    start = datetime.combine(parsed, time.min)
    return start, start + timedelta(hours=23, minutes=59, seconds=59)


class SlotService:
    """
    Business logic for slots.

    Error Handling Strategy:
        Domain errors (NotFoundError, ConflictError, ValidationError) propagate
        as-is. Unexpected SQLAlchemy errors are wrapped in DatabaseError.
    """

    async def create_slot(self, db: AsyncSession, payload: SlotCreate) -> Slot:
        """
        Insert a new unbooked slot.

        The existence check gives the common case a clear message; the UNIQUE
        constraint catches a duplicate inserted between check and flush.
        """
        try:
            result = await db.execute(
                select(Slot.id).where(
                    Slot.date == payload.date,
                    Slot.start_time == payload.start_time,
                    Slot.end_time == payload.end_time,
                    Slot.mode == payload.mode,
                )
            )
            if result.first() is not None:
                raise ConflictError(message=SLOT_EXISTS_MESSAGE)

            slot = Slot(
                date=payload.date,
                start_time=payload.start_time,
                end_time=payload.end_time,
                mode=payload.mode,
                is_booked=False,
            )
            db.add(slot)
            await db.flush()
        except IntegrityError:
            raise ConflictError(message=SLOT_EXISTS_MESSAGE)
        except SQLAlchemyError as e:
            logger.error("Database error creating slot: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info(
            "Slot created: %s %s %s-%s (%s)",
            slot.id, slot.date.date(), slot.start_time, slot.end_time, slot.mode,
        )
        return slot

    async def list_slots(self, db: AsyncSession, day: Optional[str]) -> List[SlotResponse]:
        """All slots whose date falls within the given day, earliest first."""
        start, end = day_window(day or "")
        try:
            result = await db.execute(
                select(Slot)
                .where(Slot.date >= start, Slot.date < end)
                .order_by(Slot.date, Slot.start_time)
            )
            slots = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing slots: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        return [SlotResponse.model_validate(slot) for slot in slots]

    async def book_slot(
        self,
        db: AsyncSession,
        slot_id: str,
        data_id: Optional[str] = None,
    ) -> SlotResponse:
        """
        Book a slot, optionally linking an intake submission.

        Args:
            slot_id: id of the slot to book
            data_id: id of the submission to mark submitted (paired booking);
                     None books the slot alone

        Raises:
            NotFoundError: slot or submission does not exist (→ 404)
            ConflictError: slot already booked (→ 400)
        """
        slot_uuid = parse_id(slot_id, "Slot")
        try:
            slot = await db.get(Slot, slot_uuid)
            if slot is None:
                raise NotFoundError(resource="Slot", resource_id=str(slot_uuid))

            submission: Optional[IntakeSubmission] = None
            if data_id is not None:
                submission = await db.get(IntakeSubmission, parse_id(data_id, "Data"))
                if submission is None:
                    raise NotFoundError(resource="Data", resource_id=data_id)

            if slot.is_booked:
                raise ConflictError(message=ALREADY_BOOKED_MESSAGE, context={"slot_id": str(slot_uuid)})

            result = await db.execute(
                update(Slot)
                .where(Slot.id == slot_uuid, Slot.is_booked.is_(False))
                .values(is_booked=True)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                # Another request booked it between our read and this update
                logger.info("Lost booking race for slot %s", slot_uuid)
                raise ConflictError(message=ALREADY_BOOKED_MESSAGE, context={"slot_id": str(slot_uuid)})

            if submission is not None:
                submission.is_submitted = True
            await db.flush()
            await db.refresh(slot)

        except BookingAPIError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error booking slot %s: %s", slot_uuid, str(e), exc_info=True)
            raise DatabaseError(context={"slot_id": str(slot_uuid), "error_type": type(e).__name__})

        if submission is not None:
            logger.info("Slot %s booked for submission %s", slot.id, submission.id)
        else:
            logger.info("Slot %s booked", slot.id)
        return SlotResponse.model_validate(slot)


slot_service = SlotService()
