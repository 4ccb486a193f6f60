"""
Booking API - Category Route Handlers
======================================

The explicit category collection. GET /api/categories (in blogs.py) is a
separate listing derived from posts; the two can disagree.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.database import get_db_session
from bookingapi.schemas.blog import CategoryCreate, CategoryResponse
from bookingapi.schemas.common import ErrorResponse, MessageResponse
from bookingapi.services.category_service import category_service

router = APIRouter(tags=["Categories"])


@router.post(
    "/add-category",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"description": "Category missing or already exists", "model": ErrorResponse}},
    summary="Add a category",
)
async def add_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await category_service.add_category(db, payload.category)
    return MessageResponse(message="Category added successfully")


@router.get(
    "/api/getcategories",
    response_model=List[CategoryResponse],
    summary="List the category collection",
)
async def list_categories(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[CategoryResponse]:
    return await category_service.list_categories(db)
