"""
Interview session CRUD operations.

Provides Create, Read, Update operations for SessionModel with eager
loading of host/participant and atomic conditional state transitions.

Dependencies: sqlalchemy, talentiq.boundary.db.models
System role: Interview session persistence operations
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from talentiq.boundary.db.CRUD.base_crud import BaseCRUD
from talentiq.boundary.db.models.session_model import SessionModel, SessionStatus

DEFAULT_LIST_LIMIT = 20


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with listing queries that eager-load the host and
    participant, and with compare-and-set updates used by join/end so that
    concurrent requests cannot both pass a read-then-write check.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_with_users(self, db: AsyncSession, id: UUID) -> SessionModel | None:
        """
        Retrieve session with eagerly loaded host and participant.

        Always reloads column values so the result reflects conditional
        updates issued earlier in the same transaction.

        Args:
            db: Async database session
            id: Session UUID

        Returns:
            SessionModel with users loaded, None if not found
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.id == id)
            .options(
                selectinload(SessionModel.host),
                selectinload(SessionModel.participant),
            )
            .execution_options(populate_existing=True)
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(
        self,
        db: AsyncSession,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[SessionModel]:
        """
        Retrieve active sessions, newest first, with host and participant loaded.

        Args:
            db: Async database session
            limit: Maximum number of sessions to return

        Returns:
            Sequence of active SessionModels
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.status == SessionStatus.ACTIVE)
            .options(
                selectinload(SessionModel.host),
                selectinload(SessionModel.participant),
            )
            .order_by(SessionModel.created_at.desc())
            .limit(limit)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    async def list_recent_completed_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[SessionModel]:
        """
        Retrieve completed sessions the user hosted or joined, newest first.

        Args:
            db: Async database session
            user_id: User UUID (host or participant)
            limit: Maximum number of sessions to return

        Returns:
            Sequence of completed SessionModels with users loaded
        """
        stmt = (
            select(SessionModel)
            .where(
                SessionModel.status == SessionStatus.COMPLETED,
                or_(
                    SessionModel.host_id == user_id,
                    SessionModel.participant_id == user_id,
                ),
            )
            .options(
                selectinload(SessionModel.host),
                selectinload(SessionModel.participant),
            )
            .order_by(SessionModel.created_at.desc())
            .limit(limit)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    async def claim_participant(
        self,
        db: AsyncSession,
        id: UUID,
        participant_id: UUID,
    ) -> bool:
        """
        Set the participant only if the session is active and has none.

        Args:
            db: Async database session
            id: Session UUID
            participant_id: Joining user's UUID

        Returns:
            True if this call claimed the slot, False otherwise
        """
        stmt = (
            update(SessionModel)
            .where(
                SessionModel.id == id,
                SessionModel.status == SessionStatus.ACTIVE,
                SessionModel.participant_id.is_(None),
            )
            .values(participant_id=participant_id)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1

    async def complete_if_active(
        self,
        db: AsyncSession,
        id: UUID,
        host_id: UUID,
        ended_at: datetime,
    ) -> bool:
        """
        Mark the session completed only if it is active and owned by host_id.

        Args:
            db: Async database session
            id: Session UUID
            host_id: Caller's UUID, must match the recorded host
            ended_at: End timestamp to record

        Returns:
            True if the transition happened, False otherwise
        """
        stmt = (
            update(SessionModel)
            .where(
                SessionModel.id == id,
                SessionModel.host_id == host_id,
                SessionModel.status == SessionStatus.ACTIVE,
            )
            .values(status=SessionStatus.COMPLETED, ended_at=ended_at)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1

    async def mark_cleanup_pending(self, db: AsyncSession, id: UUID) -> None:
        """
        Flag a completed session whose external call or channel survived.

        Args:
            db: Async database session
            id: Session UUID
        """
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == id)
            .values(cleanup_pending=True)
            .execution_options(synchronize_session=False)
        )
        await db.execute(stmt)


session_crud = SessionCRUD()
