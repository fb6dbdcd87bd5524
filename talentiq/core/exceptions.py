"""
Exception hierarchy for the TalentIQ application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and
carry the HTTP status the API layer maps them to.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TalentIQException(Exception):
    """Base exception for all TalentIQ application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TalentIQException):
    """Raised when required input is missing or invalid."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnauthorizedError(TalentIQException):
    """Raised when a credential is missing or cannot be verified."""

    status_code = 401


class ForbiddenError(TalentIQException):
    """Raised when the caller is authenticated but not permitted."""

    status_code = 403


class NotFoundError(TalentIQException):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class SessionNotFoundError(NotFoundError):
    """Raised when an interview session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__("Session not found", details)


class ProblemNotFoundError(NotFoundError):
    """Raised when a practice problem id is not in the catalog."""

    def __init__(self, problem_id: str) -> None:
        super().__init__("Problem not found", {"problem_id": problem_id})


class ExternalServiceError(TalentIQException):
    """Raised when a downstream provider (video, chat, identity) call fails."""

    def __init__(
        self,
        message: str,
        service: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize external service error.

        Args:
            message: Error message
            service: Provider name (stream-video, stream-chat, clerk)
            operation: Operation that failed (create_call, add_member, ...)
            details: Additional context
        """
        details = details or {}
        if service:
            details["service"] = service
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ConfigurationError(TalentIQException):
    """Raised at startup when required settings are missing."""
