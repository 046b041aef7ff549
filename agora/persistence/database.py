"""Async engine and session factory for the Postgres store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine from ``settings.database``.

    Raises ValueError when DATABASE__URL is unset; callers should check
    ``settings.uses_database`` first.
    """
    db = settings.database
    if db.url is None:
        raise ValueError("DATABASE__URL is not configured")
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are rebuilt from rows, so nothing depends on expiry or autoflush.
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
