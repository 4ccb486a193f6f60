"""
Booking API - Category Service
===============================

What:  The explicit category collection (POST /add-category,
       GET /api/getcategories). See BlogService.derived_categories for the
       list computed from posts.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.exceptions import ConflictError, DatabaseError, ValidationError
from bookingapi.models.category import Category
from bookingapi.schemas.blog import CategoryResponse

logger = logging.getLogger(__name__)


class CategoryService:

    async def add_category(self, db: AsyncSession, name: Optional[str]) -> Category:
        """
        Insert a category name.

        Raises:
            ValidationError: name missing or blank (→ 400)
            ConflictError: name already present (→ 400)
        """
        if not name or not name.strip():
            raise ValidationError(message="Category is required", field="category")

        try:
            existing = await db.execute(select(Category.id).where(Category.name == name))
            if existing.first() is not None:
                raise ConflictError(message="Category already exists", context={"name": name})

            category = Category(name=name)
            db.add(category)
            await db.flush()
        except IntegrityError:
            raise ConflictError(message="Category already exists", context={"name": name})
        except SQLAlchemyError as e:
            logger.error("Error adding category: %s", str(e), exc_info=True)
            raise DatabaseError(message="Internal server error", context={"name": name})

        logger.info("Category added: %s", name)
        return category

    async def list_categories(self, db: AsyncSession) -> List[CategoryResponse]:
        """Every category in insertion order."""
        try:
            result = await db.execute(select(Category).order_by(Category.created_at, Category.id))
            categories = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})
        return [CategoryResponse.model_validate(c) for c in categories]


category_service = CategoryService()
