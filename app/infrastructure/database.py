"""Database Session Manager — one single-use connection per request, always released.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every session is closed in finally, on success and on failure
    - NullPool: a connection lives exactly as long as its session; nothing is kept
      between requests
    - SQLAlchemy exceptions that escape a repository are mapped to StorageError

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import pool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import StorageError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Hands out per-request async sessions with rollback and guaranteed close."""

    def __init__(self, database_url: str, connect_args: dict | None = None):
        self.engine = create_async_engine(
            database_url,
            poolclass=pool.NullPool,
            connect_args=connect_args or {},
        )
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
            logger.error(f"Unhandled database error: {e}", exc_info=True)
            raise StorageError("session", "Error de base de datos")
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        probe = "SELECT 1 FROM DUAL" if self.engine.dialect.name == "oracle" else "SELECT 1"
        try:
            async with self.session() as db:
                await db.execute(text(probe))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, connect_args: dict | None = None) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, connect_args)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
