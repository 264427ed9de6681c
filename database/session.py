"""
Async SQLAlchemy engine and session factory.

A ``Database`` is created once at application startup, kept on
``app.state`` and disposed at shutdown; request handlers receive their
session through ``get_db_session``.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from config.settings import Settings
from database.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the connection pool for one application instance."""

    def __init__(self, settings: Settings) -> None:
        engine_kwargs: Dict[str, Any] = {"echo": False}
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_recycle=settings.db_pool_recycle,
                pool_pre_ping=True,
            )
        if settings.database_ssl:
            engine_kwargs["connect_args"] = {"ssl": "require"}

        self.engine = create_async_engine(settings.database_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run ``SELECT 1``; ``False`` if the store is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as exc:
            logger.error("Database ping failed: %s", exc)
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
