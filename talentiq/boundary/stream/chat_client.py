"""
Stream Chat client.

Thin async wrapper over the Stream Chat server SDK: user tokens, user
upsert/delete for identity sync, and per-session channel management.
Provider errors are re-raised as ExternalServiceError.

Dependencies: stream-chat, aiohttp
System role: Chat boundary for interview session channels
"""

import asyncio
import logging

import aiohttp
from stream_chat import StreamChatAsync
from stream_chat.base.exceptions import StreamAPIException

from talentiq.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

_PROVIDER_ERRORS = (StreamAPIException, aiohttp.ClientError, asyncio.TimeoutError)


class StreamChatClient:
    """Stream Chat operations used by the application."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        channel_type: str = "messaging",
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize client configuration.

        The SDK client opens an aiohttp session, so it is created in
        ``connect()`` from inside the running event loop.

        Args:
            api_key: Stream API key
            api_secret: Stream API secret
            channel_type: Channel type for session channels
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._api_secret = api_secret
        self._channel_type = channel_type
        self._timeout = timeout
        self._client: StreamChatAsync | None = None

    async def connect(self) -> None:
        self._client = StreamChatAsync(
            api_key=self._api_key,
            api_secret=self._api_secret,
            timeout=self._timeout,
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    @property
    def client(self) -> StreamChatAsync:
        if self._client is None:
            raise RuntimeError("Stream chat client is not connected")
        return self._client

    def create_token(self, user_id: str) -> str:
        """
        Create a user token valid for both chat and video.

        Args:
            user_id: Identity-provider subject id

        Returns:
            str: Signed user token
        """
        return self.client.create_token(user_id)

    async def upsert_user(self, user_id: str, name: str, image: str) -> None:
        """Create or update a chat user."""
        try:
            await self.client.upsert_user({"id": user_id, "name": name, "image": image})
        except _PROVIDER_ERRORS as e:
            logger.error("Error upserting user to Stream", extra={"user_id": user_id})
            raise ExternalServiceError(
                "Failed to upsert chat user", service="stream-chat", operation="upsert_user"
            ) from e

    async def delete_user(self, user_id: str) -> None:
        """Delete a chat user and mark their messages deleted."""
        try:
            await self.client.delete_user(user_id, mark_messages_deleted=True)
        except _PROVIDER_ERRORS as e:
            logger.error("Error deleting user from Stream", extra={"user_id": user_id})
            raise ExternalServiceError(
                "Failed to delete chat user", service="stream-chat", operation="delete_user"
            ) from e

    async def create_channel(
        self,
        channel_id: str,
        name: str,
        created_by_id: str,
        members: list[str],
    ) -> None:
        """
        Create a session channel.

        Args:
            channel_id: Channel id (the session call id)
            name: Display name
            created_by_id: Creating user's subject id
            members: Initial member subject ids
        """
        channel = self.client.channel(
            self._channel_type,
            channel_id,
            {"name": name, "members": members, "created_by_id": created_by_id},
        )
        try:
            await channel.create(created_by_id)
        except _PROVIDER_ERRORS as e:
            raise ExternalServiceError(
                "Failed to create chat channel",
                service="stream-chat",
                operation="create_channel",
                details={"channel_id": channel_id},
            ) from e

    async def add_member(self, channel_id: str, user_id: str) -> None:
        """Add a user to a session channel."""
        channel = self.client.channel(self._channel_type, channel_id)
        try:
            await channel.add_members([user_id])
        except _PROVIDER_ERRORS as e:
            raise ExternalServiceError(
                "Failed to add chat channel member",
                service="stream-chat",
                operation="add_member",
                details={"channel_id": channel_id, "user_id": user_id},
            ) from e

    async def delete_channel(self, channel_id: str) -> None:
        """Delete a session channel."""
        channel = self.client.channel(self._channel_type, channel_id)
        try:
            await channel.delete()
        except _PROVIDER_ERRORS as e:
            raise ExternalServiceError(
                "Failed to delete chat channel",
                service="stream-chat",
                operation="delete_channel",
                details={"channel_id": channel_id},
            ) from e
