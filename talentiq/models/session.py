"""
Interview session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from talentiq.boundary.db.models.session_model import Difficulty, SessionStatus
from talentiq.models.common import CamelModel
from talentiq.models.user import UserSummary


class CreateSessionRequest(CamelModel):
    """
    Request schema for creating a new session.

    Both fields are optional at the schema level so a missing value is
    reported by the service as a 400, not a 422.
    """

    problem: str | None = Field(default=None, description="Problem title")
    difficulty: str | None = Field(default=None, description="easy, medium or hard")


class SessionResponse(CamelModel):
    """Session with host and participant populated."""

    id: uuid.UUID
    problem: str
    difficulty: Difficulty
    host: UserSummary
    participant: UserSummary | None = None
    call_id: str
    status: SessionStatus
    started_at: datetime
    ended_at: datetime | None = None
    cleanup_pending: bool = False
    created_at: datetime
    updated_at: datetime


class SessionEnvelope(CamelModel):
    """Single-session response: ``{message, session}``."""

    message: str
    session: SessionResponse


class ActiveSessionsResponse(CamelModel):
    """Active session listing: ``{message, activeSessions}``."""

    message: str
    active_sessions: list[SessionResponse]


class RecentSessionsResponse(CamelModel):
    """Caller's completed sessions: ``{message, recentSessions}``."""

    message: str
    recent_sessions: list[SessionResponse]
