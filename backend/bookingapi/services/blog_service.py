"""
Booking API - Blog Service
===========================

What:  Blog post CRUD (no in-place update), filtering and the category list
       derived from posts.
Who:   Called by the /api/blogs*, /api/blogsfilter and /api/categories routes.

Filtering (GET /api/blogsfilter):
    category → exact match on blog_posts.category
    search   → title ILIKE %term% OR content ILIKE %term%
    Both present → AND of the two. LIKE wildcards in the term are escaped,
    so the search is a literal case-insensitive substring match.
"""

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.exceptions import DatabaseError, NotFoundError
from bookingapi.models.blog import BlogPost
from bookingapi.schemas.blog import BlogCreate, BlogResponse
from bookingapi.services._ids import parse_id

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class BlogService:
    """Business logic for blog posts."""

    async def list_posts(self, db: AsyncSession) -> List[BlogResponse]:
        return await self.filter_posts(db)

    async def filter_posts(
        self,
        db: AsyncSession,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[BlogResponse]:
        """
        List posts, optionally filtered.

        Empty strings count as "not supplied", matching how the frontend
        sends `?search=&category=` for an unfiltered view.
        """
        query = select(BlogPost)
        if category:
            query = query.where(BlogPost.category == category)
        if search:
            pattern = _like_pattern(search)
            query = query.where(
                or_(
                    BlogPost.title.ilike(pattern, escape="\\"),
                    BlogPost.content.ilike(pattern, escape="\\"),
                )
            )
        query = query.order_by(BlogPost.created_at, BlogPost.id)

        try:
            result = await db.execute(query)
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing blog posts: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        return [BlogResponse.model_validate(post) for post in posts]

    async def create_post(self, db: AsyncSession, payload: BlogCreate) -> BlogResponse:
        post = BlogPost(
            title=payload.title,
            content=payload.content,
            image=payload.image,
            category=payload.category,
        )
        try:
            db.add(post)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating blog post: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("Blog post created: %s (%s)", post.id, post.category or "uncategorized")
        return BlogResponse.model_validate(post)

    async def _load(self, db: AsyncSession, post_id: str) -> BlogPost:
        post_uuid = parse_id(post_id, "Blog")
        try:
            post = await db.get(BlogPost, post_uuid)
        except SQLAlchemyError as e:
            logger.error("Database error fetching blog post %s: %s", post_id, str(e))
            raise DatabaseError(context={"post_id": post_id})
        if post is None:
            raise NotFoundError(resource="Blog", resource_id=post_id)
        return post

    async def get_post(self, db: AsyncSession, post_id: str) -> BlogResponse:
        return BlogResponse.model_validate(await self._load(db, post_id))

    async def delete_post(self, db: AsyncSession, post_id: str) -> None:
        post = await self._load(db, post_id)
        try:
            await db.delete(post)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting blog post %s: %s", post_id, str(e))
            raise DatabaseError(context={"post_id": post_id})
        logger.info("Blog post deleted: %s", post_id)

    async def derived_categories(self, db: AsyncSession) -> List[str]:
        """
        Distinct non-empty categories used by posts, in first-seen order.

        Independent of the `categories` table: a category added via
        /add-category appears here only once a post uses it.
        """
        try:
            result = await db.execute(
                select(BlogPost.category)
                .where(BlogPost.category.is_not(None), BlogPost.category != "")
                .order_by(BlogPost.created_at, BlogPost.id)
            )
            values = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error deriving categories: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        # dict preserves insertion order
        return list(dict.fromkeys(values))


blog_service = BlogService()
