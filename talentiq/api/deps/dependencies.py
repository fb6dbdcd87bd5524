"""
Dependency injection container.

The ServiceContainer owns every process-wide handle (database engine,
provider clients, token verifier). It is built in ``create_app``, started
in the lifespan and exposed on ``app.state.services``. Factory functions
below hand those handles to routes via ``Depends``.

Dependencies: talentiq.configs, talentiq.application, talentiq.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talentiq.application.services import (
    ChatService,
    IdentitySyncService,
    ProblemService,
    SessionService,
)
from talentiq.boundary.db import Database, get_async_db
from talentiq.boundary.db.CRUD.user_crud import user_crud
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.boundary.execution import PistonClient
from talentiq.boundary.identity import ClerkTokenVerifier
from talentiq.boundary.stream import StreamChatClient, StreamVideoClient
from talentiq.configs import Settings
from talentiq.core.exceptions import (
    ConfigurationError,
    ForbiddenError,
    TalentIQException,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

SESSION_COOKIE = "__session"


class ServiceContainer:
    """Container for process-wide service handles."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.database = Database(settings.database)
        self._chat: StreamChatClient | None = None
        self._video: StreamVideoClient | None = None
        self._verifier: ClerkTokenVerifier | None = None
        self._piston: PistonClient | None = None

    def validate(self) -> None:
        """
        Check required provider settings.

        Raises:
            ConfigurationError: If Stream keys, Clerk key material or (in
                production) the Inngest signing key are missing
        """
        if not self.settings.stream.is_configured:
            raise ConfigurationError("STREAM_API_KEY and STREAM_API_SECRET are required")
        if not self.settings.clerk.is_configured:
            raise ConfigurationError("CLERK_JWT_KEY or CLERK_JWKS_URL is required")
        if self.settings.is_production and not self.settings.inngest.signing_key:
            raise ConfigurationError("INNGEST_SIGNING_KEY is required in production")

    async def startup(self) -> None:
        """Validate settings, connect the database and build provider clients."""
        self.validate()
        settings = self.settings

        await self.database.connect()

        self._chat = StreamChatClient(
            api_key=settings.stream.api_key,
            api_secret=settings.stream.api_secret,
            channel_type=settings.stream.channel_type,
            timeout=settings.stream.timeout,
        )
        await self._chat.connect()
        self._video = StreamVideoClient(
            api_key=settings.stream.api_key,
            api_secret=settings.stream.api_secret,
            base_url=settings.stream.video_base_url,
            call_type=settings.stream.call_type,
            timeout=settings.stream.timeout,
        )
        self._verifier = ClerkTokenVerifier(
            jwt_key=settings.clerk.jwt_key,
            jwks_url=settings.clerk.jwks_url,
            authorized_parties=[settings.client_url],
            timeout=settings.clerk.timeout,
            jwks_refresh_interval=settings.clerk.jwks_refresh_interval,
        )
        self._piston = PistonClient(
            base_url=settings.piston.api_url,
            timeout=settings.piston.timeout,
        )
        logger.info("Service container started")

    async def shutdown(self) -> None:
        """Close provider clients and dispose the database engine."""
        for client in (self._chat, self._video, self._verifier, self._piston):
            if client is not None:
                await client.aclose()
        self._chat = self._video = self._verifier = self._piston = None
        await self.database.disconnect()
        logger.info("Service container stopped")

    @staticmethod
    def _require(handle, name: str):
        if handle is None:
            raise RuntimeError(f"{name} is not available before startup")
        return handle

    @property
    def chat(self) -> StreamChatClient:
        return self._require(self._chat, "Chat client")

    @property
    def video(self) -> StreamVideoClient:
        return self._require(self._video, "Video client")

    @property
    def verifier(self) -> ClerkTokenVerifier:
        return self._require(self._verifier, "Token verifier")

    @property
    def piston(self) -> PistonClient:
        return self._require(self._piston, "Code execution client")

    @property
    def identity_sync(self) -> IdentitySyncService:
        return IdentitySyncService(self.database, self.chat)


def get_services(request: Request) -> ServiceContainer:
    """Get the service container attached to the application."""
    return request.app.state.services


def get_token_verifier(
    services: ServiceContainer = Depends(get_services),
) -> ClerkTokenVerifier:
    return services.verifier


def _extract_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE) or None


async def get_current_subject(
    request: Request,
    verifier: ClerkTokenVerifier = Depends(get_token_verifier),
) -> str:
    """
    Verify the caller's session token and return its subject id.

    Resolved before any database dependency, so an unauthenticated request
    never opens a database session.

    Raises:
        UnauthorizedError: If no token is present or it fails verification
    """
    token = _extract_token(request)
    if token is None:
        raise UnauthorizedError("Unauthorized - no token provided")
    return await verifier.verify(token)


async def get_current_user(
    clerk_id: str = Depends(get_current_subject),
    db: AsyncSession = Depends(get_async_db),
) -> UserModel:
    """
    Resolve the authenticated caller to a local user.

    Raises:
        ForbiddenError: If no local user exists for the subject
        TalentIQException: If the lookup itself fails
    """
    try:
        user = await user_crud.get_by_clerk_id(db, clerk_id)
    except SQLAlchemyError as e:
        logger.exception("User lookup failed", extra={"clerk_id": clerk_id})
        raise TalentIQException("Internal server error") from e
    if user is None:
        raise ForbiddenError("Forbidden: User not found")
    return user


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    services: ServiceContainer = Depends(get_services),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        services: Service container

    Returns:
        SessionService: Service bound to the request's database session
    """
    return SessionService(db=db, video=services.video, chat=services.chat)


def get_chat_service(services: ServiceContainer = Depends(get_services)) -> ChatService:
    return ChatService(chat=services.chat)


def get_problem_service(
    services: ServiceContainer = Depends(get_services),
) -> ProblemService:
    return ProblemService(executor=services.piston)


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
