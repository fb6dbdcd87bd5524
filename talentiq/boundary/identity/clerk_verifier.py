"""
Clerk session token verification.

Verifies RS256 session JWTs issued by Clerk, either against a configured
PEM public key (networkless) or against the instance JWKS, fetched over
HTTP and cached per key id.

Dependencies: python-jose, httpx
System role: Identity boundary; turns a bearer credential into a subject id
"""

import logging
import time
from typing import Any

import httpx
from jose import JWTError, jwt

from talentiq.core.exceptions import ExternalServiceError, UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHMS = ["RS256"]


class ClerkTokenVerifier:
    """Verify Clerk session tokens and extract the subject id."""

    def __init__(
        self,
        jwt_key: str | None = None,
        jwks_url: str | None = None,
        authorized_parties: list[str] | None = None,
        timeout: float = 10.0,
        jwks_refresh_interval: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize verifier.

        Args:
            jwt_key: PEM public key; when set, JWKS is never fetched
            jwks_url: JWKS endpoint used when no PEM key is configured
            authorized_parties: Allowed ``azp`` origins; empty disables the check
            timeout: JWKS fetch timeout in seconds
            jwks_refresh_interval: Minimum seconds between JWKS fetches
                triggered by an unknown key id
            http_client: Optional pre-built client (tests)
        """
        if not jwt_key and not jwks_url:
            raise ValueError("Either jwt_key or jwks_url is required")
        self._jwt_key = jwt_key.replace("\\n", "\n") if jwt_key else None
        self._jwks_url = jwks_url
        self._authorized_parties = authorized_parties or []
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._jwks: dict[str, dict[str, Any]] = {}
        self._jwks_refresh_interval = jwks_refresh_interval
        self._jwks_fetched_at: float | None = None

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _fetch_jwks(self) -> None:
        try:
            response = await self._client.get(self._jwks_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ExternalServiceError(
                "Failed to fetch identity provider signing keys",
                service="clerk",
                operation="fetch_jwks",
                details={"error": str(e)},
            ) from e
        self._jwks = {key["kid"]: key for key in response.json().get("keys", []) if "kid" in key}
        self._jwks_fetched_at = time.monotonic()
        logger.info("Fetched identity provider JWKS", extra={"key_count": len(self._jwks)})

    def _jwks_refresh_due(self) -> bool:
        if self._jwks_fetched_at is None:
            return True
        return time.monotonic() - self._jwks_fetched_at >= self._jwks_refresh_interval

    async def _resolve_key(self, token: str) -> str | dict[str, Any]:
        if self._jwt_key:
            return self._jwt_key

        try:
            kid = jwt.get_unverified_header(token).get("kid")
        except JWTError as e:
            raise UnauthorizedError("Invalid token") from e
        if not kid:
            raise UnauthorizedError("Invalid token")

        if kid not in self._jwks and self._jwks_refresh_due():
            # Keys rotate; refresh before rejecting, at most once per interval
            await self._fetch_jwks()
        key = self._jwks.get(kid)
        if key is None:
            raise UnauthorizedError("Invalid token")
        return key

    async def verify(self, token: str) -> str:
        """
        Verify a session token and return its subject.

        Args:
            token: Raw JWT from the Authorization header or session cookie

        Returns:
            str: Identity-provider subject id (``sub`` claim)

        Raises:
            UnauthorizedError: If the token is invalid, expired, issued for
                another origin, or has no subject
            ExternalServiceError: If signing keys cannot be fetched
        """
        key = await self._resolve_key(token)
        try:
            claims = jwt.decode(
                token,
                key,
                algorithms=ALGORITHMS,
                options={"verify_aud": False},
            )
        except JWTError as e:
            logger.warning("Token verification failed", extra={"error": str(e)})
            raise UnauthorizedError("Could not validate credentials") from e

        azp = claims.get("azp")
        if azp and self._authorized_parties and azp not in self._authorized_parties:
            raise UnauthorizedError("Token issued for an unauthorized party", {"azp": azp})

        subject = claims.get("sub")
        if not subject:
            raise UnauthorizedError("Invalid token")
        return subject
