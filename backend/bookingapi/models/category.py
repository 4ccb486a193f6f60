"""
Booking API - Category SQLAlchemy Model
========================================

What:  ORM model for the explicit `categories` table (POST /add-category,
       GET /api/getcategories). Names are unique at the database level.
       GET /api/getcategories lists rows in insertion order (created_at).
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookingapi.database import Base, naive_utcnow


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        default=naive_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
