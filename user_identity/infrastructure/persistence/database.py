"""SQLAlchemy async engine, sessions and schema helpers for the user store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from user_identity.infrastructure.config.settings import Settings


class Base(DeclarativeBase):
    """Declarative base shared by the ORM models (only UserModel for now)."""


def create_database_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine for settings.database_url.

    PostgreSQL (asyncpg) gets a sized, pre-pinged pool. SQLite (aiosqlite)
    is left on SQLAlchemy's default pool, which does not accept sizing.

    Args:
        settings: Application settings containing database configuration

    Returns:
        Configured AsyncEngine instance
    """
    if settings.is_sqlite:
        return create_async_engine(settings.database_url, echo=settings.db_echo)

    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by UserRepository, one short session per call.

    expire_on_commit is off so the row saved by UserRepository.save can
    still be mapped back to an entity after the commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create the users table and its unique email index if missing."""
    # Registers UserModel on Base.metadata
    from user_identity.infrastructure.persistence.models import user_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
