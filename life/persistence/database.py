"""Database engine and unit-of-work helpers for PostgreSQL (asyncpg)."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from life.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    No connection is opened until the first query.

    Args:
        database: Database settings
        echo: Log every SQL statement

    Returns:
        Configured async engine
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        # asyncpg: connect timeout and per-statement timeout, both in seconds
        connect_args={
            "timeout": database.command_timeout,
            "command_timeout": database.command_timeout,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Repositories flush explicitly and read back what they wrote, so objects
    are neither autoflushed nor expired on commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One transaction per request.

    Commits when the block exits normally and rolls back when it raises.
    Repositories isolate statements that may fail on purpose (invite
    redemption, unique usernames) in savepoints so the outer transaction
    survives them.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logfire.warn("Transaction rolled back", error_type=type(e).__name__)
            await session.rollback()
            raise
