"""
Booking API - IntakeSubmission SQLAlchemy Model
================================================

What:  ORM model for the `intake_submissions` table ("Data" in the API).
How:   Created by a requester via POST /data; flipped to is_submitted=True
       when an admin links it to a booked slot.

created_at records insertion order; GET /api/latestdata sorts on it, with
the id as tie-breaker for rows stamped in the same clock tick.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from bookingapi.database import Base, naive_utcnow


class IntakeSubmission(Base):
    __tablename__ = "intake_submissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    time: Mapped[str] = mapped_column(String(20), nullable=False)
    mode: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    is_submitted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        default=naive_utcnow,
    )

    __table_args__ = (
        Index("idx_intake_pending", "is_submitted", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<IntakeSubmission(id={self.id}, name='{self.name}', submitted={self.is_submitted})>"
