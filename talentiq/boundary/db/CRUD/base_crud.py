"""
Base CRUD operations for SQLAlchemy models.

Provides the generic insert shared by model-specific CRUD classes.
Lookups and state transitions live on the subclasses, next to the
queries that need them.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from talentiq.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Methods flush but never commit: the caller owns the transaction
    boundary.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, db: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            db: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance
