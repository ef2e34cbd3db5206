"""Database — async engine, per-request sessions, and the one commit path for writes.

Invariants:
    - Every session rolls back on any SQLAlchemy exception before it is closed
    - commit() is the only place a unique or foreign-key violation becomes
      ConflictError (409); session() turns anything else into DatabaseError (503)
    - get_db() refuses to run before init_db()

Design Decisions:
    - Engine options come from Settings; SQLite URLs skip the pool sizing
      arguments their pool does not accept
    - expire_on_commit=False: handlers serialize rows after the commit
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from shopping_mall.core.errors import ConflictError, DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


def engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(self, database_url: str, pool_size: int = 20, max_overflow: int = 10):
        self.engine = create_async_engine(
            database_url, **engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except OperationalError as e:
            await session.rollback()
            logger.error(f"Database unreachable: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database operation failed: {e}")
            raise DatabaseError("Database operation failed", "query")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def commit(session: AsyncSession, resource: str) -> None:
    """Commit pending writes; a constraint violation rolls back and raises ConflictError."""
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        logger.warning(
            f"Integrity error on {resource}: {e.orig}", extra={"resource": resource},
        )
        raise ConflictError(
            "Integrity constraint violated", context=ErrorContext(resource=resource),
        )


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
