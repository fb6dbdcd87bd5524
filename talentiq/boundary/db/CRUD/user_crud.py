"""
User CRUD operations.

Provides lookups and deletion keyed by identity-provider subject id.

Dependencies: sqlalchemy, talentiq.boundary.db.models
System role: User persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentiq.boundary.db.CRUD.base_crud import BaseCRUD
from talentiq.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_clerk_id(self, db: AsyncSession, clerk_id: str) -> UserModel | None:
        """
        Retrieve a user by identity-provider subject id.

        Args:
            db: Async database session
            clerk_id: Identity-provider subject id

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.clerk_id == clerk_id)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_clerk_id(self, db: AsyncSession, clerk_id: str) -> bool:
        """
        Delete a user by identity-provider subject id.

        Args:
            db: Async database session
            clerk_id: Identity-provider subject id

        Returns:
            True if a row was deleted, False if none matched
        """
        stmt = delete(UserModel).where(UserModel.clerk_id == clerk_id)
        result = await db.execute(stmt)
        return result.rowcount > 0


user_crud = UserCRUD()
