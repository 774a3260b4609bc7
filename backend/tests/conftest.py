"""
Pytest configuration and fixtures for the Homies event service tests.

Every test gets its own in-memory SQLite database so no state leaks
between tests.
"""

import sys
from datetime import datetime, timedelta
from typing import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import Base
from app.models import User, EventType
from app.config import Settings
from app.schemas.event import EventFormModel


# ============================================================================
# Test Configuration
# ============================================================================

@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Provide test-specific settings.

    Uses in-memory SQLite database for tests.
    """
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        ENVIRONMENT="test",
    )


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture(scope="function")
async def async_engine(test_settings: Settings):
    """
    Create async database engine for tests.

    Uses in-memory SQLite with StaticPool to ensure all connections
    share the same in-memory database.
    """
    engine = create_async_engine(
        test_settings.async_database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide database session for tests.

    Creates a new session for each test and rolls back after the test.
    """
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


# ============================================================================
# Reference Data Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def event_type(db_session: AsyncSession) -> EventType:
    """
    Create and return the "Fun" event type (id 2).
    """
    event_type = EventType(id=2, name="Fun")
    db_session.add(event_type)
    await db_session.commit()
    return event_type


@pytest_asyncio.fixture
async def organiser(db_session: AsyncSession) -> User:
    """
    Create and return a user who organises events.
    """
    user = User(id="organiser-id", user_name="organiser@homies.com", email="organiser@homies.com")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def helper(db_session: AsyncSession) -> User:
    """
    Create and return a user who joins events.
    """
    user = User(id="helper-id", user_name="helper@homies.com", email="helper@homies.com")
    db_session.add(user)
    await db_session.commit()
    return user


# ============================================================================
# Helper Functions
# ============================================================================

@pytest.fixture
def event_form() -> EventFormModel:
    """
    Provide a valid event form starting now and lasting two hours.
    """
    start = datetime.now()
    return EventFormModel(
        name="Test Event",
        description="Test Description",
        start=start,
        end=start + timedelta(hours=2),
        type_id=2,
    )


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """
    Configure pytest markers.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
