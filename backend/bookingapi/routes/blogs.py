"""
Booking API - Blog Route Handlers
==================================

Route Inventory:
    GET    /api/blogs                         every post
    POST   /api/blogs                         create a post (201)
    GET    /api/blogs/{id}                    one post
    DELETE /api/blogs/{id}                    delete a post
    GET    /api/blogsfilter?search=&category= filtered posts
    GET    /api/categories                    categories used by posts
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.database import get_db_session
from bookingapi.schemas.blog import BlogCreate, BlogResponse
from bookingapi.schemas.common import ErrorResponse, MessageResponse
from bookingapi.services.blog_service import blog_service

router = APIRouter(prefix="/api", tags=["Blog"])


@router.get("/blogs", response_model=List[BlogResponse], summary="List blog posts")
async def list_blogs(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[BlogResponse]:
    return await blog_service.list_posts(db)


@router.post(
    "/blogs",
    status_code=201,
    response_model=BlogResponse,
    responses={400: {"description": "Missing title or content", "model": ErrorResponse}},
    summary="Create a blog post",
)
async def create_blog(
    payload: BlogCreate,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BlogResponse:
    return await blog_service.create_post(db, payload)


@router.get(
    "/blogsfilter",
    response_model=List[BlogResponse],
    summary="Filter blog posts by category and/or search term",
    description=(
        "category: exact match. search: case-insensitive substring of title or content. "
        "When both are given, a post must satisfy both."
    ),
)
async def filter_blogs(
    search: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[BlogResponse]:
    return await blog_service.filter_posts(db, search=search, category=category)


@router.get(
    "/categories",
    response_model=List[str],
    summary="Distinct categories used by blog posts",
)
async def post_categories(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> List[str]:
    return await blog_service.derived_categories(db)


@router.get(
    "/blogs/{post_id}",
    response_model=BlogResponse,
    responses={404: {"description": "Blog not found", "model": ErrorResponse}},
    summary="Get one blog post",
)
async def get_blog(
    post_id: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> BlogResponse:
    return await blog_service.get_post(db, post_id)


@router.delete(
    "/blogs/{post_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Blog not found", "model": ErrorResponse}},
    summary="Delete a blog post",
)
async def delete_blog(
    post_id: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await blog_service.delete_post(db, post_id)
    return MessageResponse(message="Blog deleted successfully")
