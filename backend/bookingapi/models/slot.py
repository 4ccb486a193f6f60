"""
Booking API - Slot SQLAlchemy Model
====================================

What:  ORM model for the `slots` table: a bookable interval on a calendar day.

Table Design:
    - date: naive DATETIME. Listing selects a half-open day window
      [day 00:00:00, day 23:59:59), so no timezone normalization happens.
    - start_time / end_time: "HH:MM" strings as entered by the admin.
    - is_booked: one-way flag (false → true), flipped by an atomic
      conditional UPDATE in SlotService.
    - UNIQUE(date, start_time, end_time, mode): the store itself rejects a
      duplicate slot, even when two creations race past the existence check.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, UniqueConstraint, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from bookingapi.database import Base


class Slot(Base):
    """
    A bookable slot.

    Lifecycle:
        1. Created by an admin (is_booked = False)
        2. Booked once (is_booked = True); never un-booked or deleted here
    """

    __tablename__ = "slots"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        comment="Calendar day of the slot (naive)",
    )

    start_time: Mapped[str] = mapped_column(String(10), nullable=False, comment="HH:MM")
    end_time: Mapped[str] = mapped_column(String(10), nullable=False, comment="HH:MM")

    mode: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="e.g. online, in-person",
    )

    is_booked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        UniqueConstraint("date", "start_time", "end_time", "mode", name="uq_slots_date_time_mode"),
        Index("idx_slots_date", "date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Slot(id={self.id}, date='{self.date}', "
            f"{self.start_time}-{self.end_time}, mode='{self.mode}', booked={self.is_booked})>"
        )
