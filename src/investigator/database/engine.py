"""Async SQLAlchemy engine and session management for the local store."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models.base import Base


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine, making sure a SQLite file has a directory to live in.

    Args:
        database_url: SQLAlchemy async database URL
        echo: Log emitted SQL

    Returns:
        A new async database engine
    """
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(database_url, echo=echo, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the session factory used by the local store.

    Returns:
        An async session factory bound to ``engine``
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for a unit of work: commits on success, rolls back on error.

    Example:
        async with session_scope(factory) as session:
            row = await session.get(CharacterDocument, character_id)
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine) -> None:
    """
    Create all tables if they do not exist yet.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
