"""Database Session Manager — async engine and read-only sessions for claim queries.

Invariants:
    - Sessions never commit; closing a session releases its connection and discards the transaction
    - Any SQLAlchemy exception raised inside session() surfaces as DatabaseError (core/errors.py)
    - One AsyncSession per concurrent query: sessions are never shared between tasks
    - Server databases get a pre-pinged, recycled pool; SQLite gets the dialect's default pool

Design Decisions:
    - Singleton db_manager set by init_db() from the FastAPI lifespan
    - expire_on_commit=False: rows stay readable after the session closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import OperationalError, DBAPIError, SQLAlchemyError
from sqlalchemy import text

from claimcount.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# most specific first
_FAILURE_KINDS = (
    (OperationalError, "execute", "Connection or operational error"),
    (DBAPIError, "query", "Database driver error"),
    (SQLAlchemyError, "query", "Database operation failed"),
)


def create_engine(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url)
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def to_database_error(e: SQLAlchemyError) -> DatabaseError:
    for kind, operation, message in _FAILURE_KINDS:
        if isinstance(e, kind):
            return DatabaseError(message, operation)
    return DatabaseError(str(e), "query")


class DatabaseSessionManager:
    """Hands out short-lived read sessions on one engine."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_engine(database_url, pool_size, max_overflow)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            error = to_database_error(e)
            logger.error(f"{error.message}: {e}", extra={"error_code": error.code})
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set on startup
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the shared session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
