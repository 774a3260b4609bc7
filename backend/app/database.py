"""Database configuration and session management."""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from app.config import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """Driver specific engine options."""
    if database_url.startswith("postgresql+asyncpg"):
        return {
            "pool_size": 20,
            "max_overflow": 50,
            "pool_pre_ping": True,
            # Disable prepared statement caching for pgbouncer compatibility
            "connect_args": {
                "server_settings": {"jit": "off"},
                "prepared_statement_cache_size": 0,
            },
        }
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_async_engine(
    settings.async_database_url,
    echo=settings.SQL_ECHO,
    **_engine_options(settings.async_database_url),
)

# Create session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Base class for models
Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one database session per request and close it afterwards."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models() -> None:
    """Create all tables registered on Base."""
    # Import models so every mapped class registers with Base
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
