"""Database Access: async engine, per-request sessions and constraint-aware commits.

Invariants:
    - A session is rolled back before any error leaves it, domain errors included
    - Driver/ORM failures reaching the session boundary become DatabaseError;
      their text goes to the log, never to the client
    - commit_or_raise turns a constraint violation into the caller's domain error
      (duplicate email → ConflictError, missing owner → NotFoundError)

Design Decisions:
    - The manager lives on app.state (set in the lifespan), like the other
      process-wide collaborators; no module-level singleton
    - expire_on_commit=False: committed rows stay readable for the response
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from qrdesk.core.errors import DatabaseError, QRDeskError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that never leak a transaction."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except QRDeskError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error: {e}")
            raise DatabaseError("storage unavailable", "execute") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            # Driver connect failures (refused socket, bad host) surface as OSError
            logger.error(f"Database health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


async def commit_or_raise(db: AsyncSession, on_violation: QRDeskError) -> None:
    """Commit; on a constraint violation roll back and raise `on_violation`."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"Constraint violation on commit: {e.orig}",
            extra={"error_code": on_violation.code},
        )
        raise on_violation from e


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request from app.state.db_manager."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if manager is None:
        raise DatabaseError("not initialized", "connect")
    async with manager.session() as session:
        yield session
