"""Service orchestrators."""

from .chat_service import ChatService
from .identity_sync_service import IdentitySyncService
from .problem_service import ProblemService, RunOutcome
from .session_service import SessionService, generate_call_id

__all__ = [
    "ChatService",
    "IdentitySyncService",
    "ProblemService",
    "RunOutcome",
    "SessionService",
    "generate_call_id",
]
