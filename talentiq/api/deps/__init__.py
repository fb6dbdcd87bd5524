"""API-specific dependencies."""

from .dependencies import (
    ServiceContainer,
    get_chat_service,
    get_current_subject,
    get_current_user,
    get_problem_service,
    get_services,
    get_session_service,
    get_token_verifier,
)

__all__ = [
    "ServiceContainer",
    "get_chat_service",
    "get_current_subject",
    "get_current_user",
    "get_problem_service",
    "get_services",
    "get_session_service",
    "get_token_verifier",
]
