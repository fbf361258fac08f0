import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from soulsync.core.config import get_database_settings

logger = logging.getLogger(__name__)


def get_async_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Creates an asynchronous SQLAlchemy engine instance."""
    if db_url.startswith("sqlite"):
        # SQLite uses a single-connection pool; pool sizing options don't apply
        return create_async_engine(db_url, echo=echo)
    return create_async_engine(
        db_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=1800, # 30 minutes
        echo=echo,
    )


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Creates an asynchronous session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False, # Important for async usage, especially with FastAPI
    )


_db_settings = get_database_settings()
async_engine = get_async_engine(_db_settings.url, echo=_db_settings.echo)
SessionFactory = get_session_factory(async_engine)


async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency to provide a database session.

    Commits when the request handler returns, rolls back if it raises.
    """
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """
    Creates any missing tables and seeds the default healing rituals.
    Alembic migrations remain the source of truth for production schemas.
    """
    from soulsync.db.models import Base
    from soulsync.services import storage

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with get_session_factory(engine)() as session:
        seeded = await storage.seed_default_rituals(session)
        await session.commit()
    logger.info(f"Database initialised ({seeded} healing rituals seeded)")
