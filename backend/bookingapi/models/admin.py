"""
Booking API - AdminUser SQLAlchemy Model
=========================================

What:  ORM model for the `admin_users` table.
How:   Rows are created by registration and read by login; never updated.

`admin` carries a UNIQUE constraint, so a second registration with the same
name fails at flush time and the service reports it as a conflict.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookingapi.database import Base


class AdminUser(Base):
    """An admin login name plus its salted password hash."""

    __tablename__ = "admin_users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    admin: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        unique=True,
        comment="Login name",
    )

    # Never the plaintext password; see services.auth_service
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="werkzeug password hash (method$salt$hash)",
    )

    def __repr__(self) -> str:
        return f"<AdminUser(id={self.id}, admin='{self.admin}')>"
