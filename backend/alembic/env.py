"""
Alembic Migration Environment
===============================

What:  Runs migrations for the booking schema through an async engine.
How:   The URL comes from bookingapi.config (DATABASE_URL), never from
       alembic.ini; every model module is imported so --autogenerate sees
       all five tables.

Usage (from backend/):
    alembic upgrade head
    alembic revision --autogenerate -m "add column"
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

import bookingapi.models  # noqa: F401  (fills Base.metadata)
from bookingapi.config import settings
from bookingapi.database import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

CONFIGURE_OPTIONS = {
    "target_metadata": Base.metadata,
    "compare_type": True,
    # SQLite cannot ALTER most constraints in place
    "render_as_batch": settings.is_sqlite,
}


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **CONFIGURE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, **CONFIGURE_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
