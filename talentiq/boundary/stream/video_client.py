"""
Stream Video client.

Calls the Stream Video server REST API with a server-side JWT to create
and hard-delete the video call backing an interview session.

Dependencies: httpx, python-jose
System role: Video boundary for interview session calls
"""

import logging
from typing import Any

import httpx
from jose import jwt

from talentiq.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def create_server_token(api_secret: str) -> str:
    """Sign the server-side token Stream expects on backend requests."""
    return jwt.encode({"server": True}, api_secret, algorithm="HS256")


class StreamVideoClient:
    """Create and delete Stream video calls."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = "https://video.stream-io-api.com/api/v2",
        call_type: str = "default",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize video client.

        Args:
            api_key: Stream API key
            api_secret: Stream API secret used to sign the server token
            base_url: Video REST base URL
            call_type: Call type for session calls
            timeout: Request timeout in seconds
            http_client: Optional pre-built client (tests)
        """
        self._call_type = call_type
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            params={"api_key": api_key},
            headers={
                "Authorization": create_server_token(api_secret),
                "stream-auth-type": "jwt",
            },
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict[str, Any], operation: str) -> dict[str, Any]:
        try:
            response = await self._client.post(path, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                f"Video provider returned {e.response.status_code}",
                service="stream-video",
                operation=operation,
                details={"path": path},
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(
                "Video provider request failed",
                service="stream-video",
                operation=operation,
                details={"path": path, "error": str(e)},
            ) from e
        return response.json()

    async def get_or_create_call(
        self,
        call_id: str,
        created_by_id: str,
        custom: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Create the call, or return it if it already exists.

        Args:
            call_id: Call id (the session call id)
            created_by_id: Host's subject id
            custom: Custom call data (problem, difficulty, sessionId)

        Returns:
            dict: Provider response body
        """
        payload = {"data": {"created_by_id": created_by_id, "custom": custom or {}}}
        body = await self._post(
            f"/video/call/{self._call_type}/{call_id}", payload, "get_or_create_call"
        )
        logger.info("Video call ready", extra={"call_id": call_id})
        return body

    async def delete_call(self, call_id: str, hard: bool = True) -> None:
        """
        Delete the call.

        Args:
            call_id: Call id
            hard: Remove call data permanently
        """
        await self._post(
            f"/video/call/{self._call_type}/{call_id}/delete", {"hard": hard}, "delete_call"
        )
        logger.info("Video call deleted", extra={"call_id": call_id})
