"""
Session service orchestrator.

Coordinates the interview session lifecycle: create, list, join, end.
Each mutation keeps the database row and the provider resources (video
call, chat channel) consistent, rolling back or compensating when a
provider call fails part way.

Dependencies: talentiq.boundary.db.CRUD, talentiq.boundary.stream
System role: Session use case orchestration
"""

import logging
import secrets
import time
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from talentiq.boundary.db.base import utcnow
from talentiq.boundary.db.CRUD.session_crud import DEFAULT_LIST_LIMIT, session_crud
from talentiq.boundary.db.models.session_model import Difficulty, SessionModel, SessionStatus
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.boundary.stream import StreamChatClient, StreamVideoClient
from talentiq.core.exceptions import (
    ExternalServiceError,
    ForbiddenError,
    SessionNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def generate_call_id() -> str:
    """
    Build a unique call id shared by the video call and chat channel.

    Returns:
        str: ``session_<epoch millis>_<24 hex chars>``
    """
    return f"session_{int(time.time() * 1000)}_{secrets.token_hex(12)}"


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        video: StreamVideoClient,
        chat: StreamChatClient,
    ) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session (request scoped)
            video: Stream video adapter
            chat: Stream chat adapter
        """
        self.db = db
        self.video = video
        self.chat = chat

    async def create_session(
        self,
        problem: str | None,
        difficulty: str | None,
        host: UserModel,
    ) -> SessionModel:
        """
        Create an active session with its video call and chat channel.

        The row is flushed, the call and channel are provisioned, and only
        then is the transaction committed. A channel failure deletes the
        call; any failure rolls the row back.

        Args:
            problem: Problem title
            difficulty: easy, medium or hard
            host: Authenticated user hosting the session

        Returns:
            SessionModel: Persisted session with host loaded

        Raises:
            ValidationError: If problem or difficulty is missing or invalid
            ExternalServiceError: If the call or channel cannot be created
        """
        if not problem or not difficulty:
            raise ValidationError("Problem and difficulty are required")
        try:
            level = Difficulty(difficulty)
        except ValueError as e:
            raise ValidationError(
                "Difficulty must be one of easy, medium, hard", field="difficulty"
            ) from e

        call_id = generate_call_id()
        try:
            session = await session_crud.create(
                self.db,
                problem=problem,
                difficulty=level,
                host_id=host.id,
                call_id=call_id,
                status=SessionStatus.ACTIVE,
            )
            await self.video.get_or_create_call(
                call_id,
                created_by_id=host.clerk_id,
                custom={
                    "problem": problem,
                    "difficulty": level.value,
                    "sessionId": str(session.id),
                },
            )
            try:
                await self.chat.create_channel(
                    call_id,
                    name=f"{problem} Session",
                    created_by_id=host.clerk_id,
                    members=[host.clerk_id],
                )
            except ExternalServiceError:
                await self._discard_call(call_id)
                raise
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Session created",
            extra={"session_id": str(session.id), "call_id": call_id},
        )
        return await session_crud.get_with_users(self.db, session.id)

    async def _discard_call(self, call_id: str) -> None:
        try:
            await self.video.delete_call(call_id)
        except ExternalServiceError:
            logger.exception("Orphaned video call left behind", extra={"call_id": call_id})

    async def list_active(self) -> Sequence[SessionModel]:
        """Active sessions, newest first."""
        return await session_crud.list_active(self.db, limit=DEFAULT_LIST_LIMIT)

    async def list_my_recent(self, user: UserModel) -> Sequence[SessionModel]:
        """Completed sessions the user hosted or joined, newest first."""
        return await session_crud.list_recent_completed_for_user(
            self.db, user.id, limit=DEFAULT_LIST_LIMIT
        )

    async def get_session(self, session_id: UUID) -> SessionModel:
        """
        Get session by ID.

        Raises:
            SessionNotFoundError: If session not found
        """
        session = await session_crud.get_with_users(self.db, session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        return session

    async def join_session(self, session_id: UUID, user: UserModel) -> SessionModel:
        """
        Claim the participant slot and add the user to the chat channel.

        The claim is a conditional update, so of two concurrent joiners only
        one succeeds. If the chat membership cannot be added the claim is
        rolled back.

        Args:
            session_id: Session UUID
            user: Authenticated user joining

        Returns:
            SessionModel: Session with participant set

        Raises:
            SessionNotFoundError: If session not found
            ValidationError: If the session is not joinable by this user
            ExternalServiceError: If the chat membership cannot be added
        """
        session = await self.get_session(session_id)
        self._check_joinable(session, user)

        claimed = await session_crud.claim_participant(self.db, session_id, user.id)
        if not claimed:
            # Lost a race; report the state that won.
            session = await self.get_session(session_id)
            self._check_joinable(session, user)
            raise ValidationError("Session already has a participant")

        try:
            await self.chat.add_member(session.call_id, user.clerk_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Participant joined session",
            extra={"session_id": str(session_id), "user_id": str(user.id)},
        )
        return await self.get_session(session_id)

    @staticmethod
    def _check_joinable(session: SessionModel, user: UserModel) -> None:
        if session.status != SessionStatus.ACTIVE:
            raise ValidationError("Cannot join a session that is not active")
        if session.participant_id is not None:
            raise ValidationError("Session already has a participant")
        if session.host_id == user.id:
            raise ValidationError("Host cannot join their own session")

    async def end_session(self, session_id: UUID, user: UserModel) -> SessionModel:
        """
        Complete the session, then delete its video call and chat channel.

        The status change is committed before teardown. If teardown fails
        the session is flagged ``cleanup_pending`` and the error is raised.

        Args:
            session_id: Session UUID
            user: Authenticated user, must be the host

        Returns:
            SessionModel: Completed session

        Raises:
            SessionNotFoundError: If session not found
            ForbiddenError: If the caller is not the host
            ValidationError: If the session is not active
            ExternalServiceError: If the call or channel could not be deleted
        """
        session = await self.get_session(session_id)
        self._check_endable(session, user)

        completed = await session_crud.complete_if_active(
            self.db, session_id, host_id=user.id, ended_at=utcnow()
        )
        if not completed:
            session = await self.get_session(session_id)
            self._check_endable(session, user)
            raise ValidationError("Cannot end a session that is not active")
        await self.db.commit()

        failures = []
        try:
            await self.video.delete_call(session.call_id)
        except ExternalServiceError as e:
            failures.append(e)
        try:
            await self.chat.delete_channel(session.call_id)
        except ExternalServiceError as e:
            failures.append(e)

        if failures:
            await session_crud.mark_cleanup_pending(self.db, session_id)
            await self.db.commit()
            logger.error(
                "Session ended with provider cleanup pending",
                extra={"session_id": str(session_id), "call_id": session.call_id},
            )
            raise ExternalServiceError(
                "Session ended but provider cleanup failed",
                operation="end_session",
                details={"session_id": str(session_id)},
            ) from failures[0]

        logger.info("Session ended", extra={"session_id": str(session_id)})
        return await self.get_session(session_id)

    @staticmethod
    def _check_endable(session: SessionModel, user: UserModel) -> None:
        if session.host_id != user.id:
            raise ForbiddenError("Only the host can end the session")
        if session.status != SessionStatus.ACTIVE:
            raise ValidationError("Cannot end a session that is not active")
