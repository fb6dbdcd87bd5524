"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, user factory, provider client mocks
Dependencies: pytest, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from talentiq.boundary.db import models  # noqa: F401
    from talentiq.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory persisting a UserModel.

    Returns:
        Callable: ``await make_user(name)`` -> committed UserModel
    """
    from talentiq.boundary.db.CRUD.user_crud import user_crud

    async def _make(name: str = "Ada Lovelace"):
        handle = uuid.uuid4().hex[:8]
        user = await user_crud.create(
            test_async_db,
            clerk_id=f"user_{handle}",
            name=name,
            email=f"{handle}@example.com",
            profile_image=f"https://img.example.com/{handle}.png",
        )
        await test_async_db.commit()
        return user

    return _make


@pytest.fixture
def mock_video():
    """Mock StreamVideoClient with awaitable methods."""
    from talentiq.boundary.stream import StreamVideoClient

    return AsyncMock(spec=StreamVideoClient)


@pytest.fixture
def mock_chat():
    """Mock StreamChatClient; ``create_token`` stays synchronous."""
    from talentiq.boundary.stream import StreamChatClient

    chat = AsyncMock(spec=StreamChatClient)
    chat.create_token.return_value = "stream-user-token"
    return chat


@pytest.fixture
def fake_user():
    """Detached user-like object for router tests."""
    return SimpleNamespace(
        id=uuid.uuid4(),
        clerk_id="user_host",
        name="Grace Hopper",
        email="grace@example.com",
        profile_image="https://img.example.com/grace.png",
    )
