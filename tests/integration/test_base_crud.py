"""
Test suite for BaseCRUD generic database operations.

Tests the shared insert path.
Uses a mocked AsyncSession to verify flush/commit boundaries.

System role: Verification of generic database layer foundation
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from talentiq.boundary.db.CRUD.base_crud import BaseCRUD
from talentiq.boundary.db.models.user_model import UserModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(UserModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    async def test_create_should_flush_before_refresh_and_never_commit(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Caller owns the transaction; create only flushes."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        instance = await base_crud.create(
            mock_session, clerk_id="user_1", name="A", email="a@example.com"
        )

        # Assert
        assert isinstance(instance, UserModel)
        mock_session.add.assert_called_once_with(instance)
        assert call_order == ["flush", "refresh"]
        mock_session.commit.assert_not_called()

