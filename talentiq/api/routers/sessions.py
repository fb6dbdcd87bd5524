"""
Session API endpoints.

Routes:
- POST /sessions - Create new interview session
- GET /sessions/active - List active sessions
- GET /sessions/my-recent - List caller's completed sessions
- GET /sessions/{id} - Get session
- POST /sessions/{id}/join - Join as participant
- POST /sessions/{id}/end - End session (host only)

Dependencies: talentiq.application.services.session_service, talentiq.models
System role: Interview session HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from talentiq.api.deps import get_current_user, get_session_service
from talentiq.api.routers.error_handling import handle_service_errors
from talentiq.application.services import SessionService
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.models.session import (
    ActiveSessionsResponse,
    CreateSessionRequest,
    RecentSessionsResponse,
    SessionEnvelope,
    SessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionEnvelope, status_code=status.HTTP_201_CREATED)
@handle_service_errors("Failed to create session")
async def create_session(
    request: CreateSessionRequest,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    Create an active session hosted by the caller.

    Args:
        request: CreateSessionRequest with problem and difficulty
        user: Authenticated host
        session_service: Injected SessionService

    Returns:
        SessionEnvelope: Created session

    Raises:
        HTTPException(400): Missing or invalid problem/difficulty
        HTTPException(500): Creation failed
    """
    session = await session_service.create_session(
        problem=request.problem,
        difficulty=request.difficulty,
        host=user,
    )
    return SessionEnvelope(
        message="Session created successfully",
        session=SessionResponse.model_validate(session),
    )


@router.get("/active", response_model=ActiveSessionsResponse)
@handle_service_errors("Failed to get active sessions")
async def get_active_sessions(
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> ActiveSessionsResponse:
    """List up to 20 active sessions, newest first."""
    sessions = await session_service.list_active()
    return ActiveSessionsResponse(
        message="Active sessions retrieved successfully",
        active_sessions=[SessionResponse.model_validate(s) for s in sessions],
    )


@router.get("/my-recent", response_model=RecentSessionsResponse)
@handle_service_errors("Failed to get recent sessions")
async def get_my_recent_sessions(
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> RecentSessionsResponse:
    """List up to 20 completed sessions the caller hosted or joined."""
    sessions = await session_service.list_my_recent(user)
    return RecentSessionsResponse(
        message="Recent sessions retrieved successfully",
        recent_sessions=[SessionResponse.model_validate(s) for s in sessions],
    )


@router.get("/{session_id}", response_model=SessionEnvelope)
@handle_service_errors("Failed to get session")
async def get_session_by_id(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    Get one session with host and participant.

    Raises:
        HTTPException(404): Session not found
    """
    session = await session_service.get_session(session_id)
    return SessionEnvelope(
        message="Session retrieved successfully",
        session=SessionResponse.model_validate(session),
    )


@router.post("/{session_id}/join", response_model=SessionEnvelope)
@handle_service_errors("Failed to join session")
async def join_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    Join a session as its participant.

    Raises:
        HTTPException(404): Session not found
        HTTPException(400): Session not active, already full, or caller is host
        HTTPException(500): Chat membership failed
    """
    session = await session_service.join_session(session_id, user)
    return SessionEnvelope(
        message="Joined session successfully",
        session=SessionResponse.model_validate(session),
    )


@router.post("/{session_id}/end", response_model=SessionEnvelope)
@handle_service_errors("Failed to end session")
async def end_session(
    session_id: UUID,
    user: UserModel = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionEnvelope:
    """
    End a session. Only the host may end it.

    Raises:
        HTTPException(404): Session not found
        HTTPException(403): Caller is not the host
        HTTPException(400): Session not active
        HTTPException(500): Provider cleanup failed
    """
    session = await session_service.end_session(session_id, user)
    return SessionEnvelope(
        message="Session ended successfully",
        session=SessionResponse.model_validate(session),
    )
