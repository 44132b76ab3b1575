"""Async database access for listings and users.

One DatabaseSessionManager per process, created by the app lifespan through
init_db() and exposed to routes through the get_db() dependency.

Invariants:
    - A session that raises SQLAlchemyError is rolled back and the error
      re-raised as DatabaseError (core/errors.py)
    - pool_pre_ping guards against stale connections
    - Pool sizing only applies to server databases (SQLite keeps its own pool)
    - Sessions never expire loaded objects on commit, so route handlers can
      serialize them after the transaction closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from campfinder.core.errors import ConfigurationError, DatabaseError

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError subclass DBAPIError
_ERROR_KINDS: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
)


def _classify(error: SQLAlchemyError) -> tuple[str, str]:
    for kind, message, operation in _ERROR_KINDS:
        if isinstance(error, kind):
            return message, operation
    return "Database operation failed", "unknown"


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            message, operation = _classify(e)
            logger.error(f"DB {operation} error: {e}")
            raise DatabaseError(message, operation) from e
        finally:
            await session.close()

    async def ping(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database ping failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db() during app startup
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    logger.info(f"Database engine ready ({db_manager.engine.url.get_backend_name()})")


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise ConfigurationError("Database not initialized")
    async with db_manager.session() as session:
        yield session
