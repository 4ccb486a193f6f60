"""
Booking API - BlogPost SQLAlchemy Model
========================================

What:  ORM model for the `blog_posts` table.

Table Design:
    - content / image: TEXT. Images arrive as data URIs or URLs; the request
      body ceiling (max_body_size) bounds their size.
    - category: free-form and optional. GET /api/categories derives its
      list from this column, independently of the `categories` table.
    - created_at: UTC, set on insert; posts are never updated in place.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookingapi.database import Base


class BlogPost(Base):
    """A blog entry. Created and deleted by an admin; never edited."""

    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    category: Mapped[str | None] = mapped_column(String(200), nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_blog_posts_category", "category"),
    )

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, title='{self.title}', category='{self.category}')>"
