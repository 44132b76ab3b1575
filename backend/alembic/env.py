"""Alembic environment for the campsites and users schema.

Migrations run through the same async driver as the app. When DATABASE_URL
is set, it is normalized by Settings (postgres:// becomes
postgresql+asyncpg://); otherwise alembic.ini's sqlalchemy.url is used for
local runs.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from campfinder.config import get_settings
from campfinder.db.base import Base
import campfinder.models  # noqa: F401  registers tables on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    if os.environ.get("DATABASE_URL"):
        return get_settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _configure_and_run(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure_and_run(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def _run_on_connection(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _database_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_on_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
