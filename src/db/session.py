"""
Database session management for scripts, migrations and tests.

Usage in scripts and tests:
    async with get_db_context() as db:
        result = await db.execute(select(Language))
        languages = result.scalars().all()
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from src.db.base import AsyncSessionLocal


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database sessions outside of FastAPI (scripts, tests).

    The session is closed when exiting the context, even if an exception occurs.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for explicit transaction control.

    Commits on successful completion, rolls back and re-raises on any exception.

    Usage:
        async with get_db_context() as db:
            async with transaction(db):
                db.add(gloss)
                db.add(GlossHistoryEntry.record(gloss, GlossSource.USER, user_id))
                # Both are committed or neither is committed
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
