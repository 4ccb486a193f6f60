"""
Booking API - Database Session Management
==========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `Database` wraps an async engine with connection pooling and a session
       factory. `create_app()` builds one instance and stores it on
       `app.state.db`; `get_db_session` hands each request its own session,
       committing on success and rolling back on error.
Who:   Route handlers receive sessions via FastAPI's dependency injection.

Transaction model:
    One session == one transaction per request. Services `flush()` their
    writes so constraint violations surface inside the service; the commit
    happens here once the handler returns, before the response is sent.
    A booking that touches both a slot and a submission is therefore
    all-or-nothing, and a failed commit is reported as a 500.
"""

import logging
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bookingapi.config import Settings
from bookingapi.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with the shared metadata
    (used by Alembic and by `Database.create_all` in tests).
    """
    pass


def naive_utcnow() -> datetime:
    """UTC now without tzinfo, for the naive DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured URL.

    SQLite engines get no pool sizing arguments; `timeout` makes concurrent
    writers wait on the file lock instead of failing immediately.
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            connect_args={"timeout": 15},
            echo=settings.log_level == "DEBUG",
        )
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


class Database:
    """
    Engine plus session factory for one application instance.

    expire_on_commit=False: attributes stay readable after the request
    transaction commits (response models are built from ORM rows).
    """

    def __init__(self, settings: Settings):
        self.engine = build_engine(settings)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create every table known to `Base.metadata` (tests, local dev)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the app's factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Routes declare it with scope="function": steps 3-4 run before the
    response is sent, and a failed commit is raised as DatabaseError (500).

    Example usage in a route:
        @router.get("/api/blogs")
        async def list_blogs(db: AsyncSession = Depends(get_db_session, scope="function")):
            return await blog_service.list_posts(db)
    """
    database: Database = request.app.state.db
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Commit failed: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__}) from e
