"""
Test suite for ClerkTokenVerifier.

Signs tokens with a throwaway RSA key and verifies them via the PEM and
JWKS paths.
"""

import time

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jose import jwk, jwt

from talentiq.boundary.identity import ClerkTokenVerifier
from talentiq.core.exceptions import ExternalServiceError, UnauthorizedError


@pytest.fixture(scope="module")
def rsa_keys():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


def _token(private_pem: str, kid: str | None = None, **claims) -> str:
    now = int(time.time())
    payload = {"sub": "user_123", "iat": now, "exp": now + 60}
    payload.update(claims)
    headers = {"kid": kid} if kid else None
    return jwt.encode(payload, private_pem, algorithm="RS256", headers=headers)


def test_requires_key_material():
    with pytest.raises(ValueError):
        ClerkTokenVerifier()


class TestPemVerification:
    @pytest.fixture
    def verifier(self, rsa_keys):
        _, public_pem = rsa_keys
        return ClerkTokenVerifier(
            jwt_key=public_pem, authorized_parties=["http://localhost:5173"]
        )

    async def test_valid_token_returns_subject(self, verifier, rsa_keys):
        token = _token(rsa_keys[0], azp="http://localhost:5173")

        assert await verifier.verify(token) == "user_123"

    async def test_expired_token_is_rejected(self, verifier, rsa_keys):
        token = _token(rsa_keys[0], exp=int(time.time()) - 10)

        with pytest.raises(UnauthorizedError, match="Could not validate credentials"):
            await verifier.verify(token)

    async def test_unauthorized_party_is_rejected(self, verifier, rsa_keys):
        token = _token(rsa_keys[0], azp="https://evil.example.com")

        with pytest.raises(UnauthorizedError):
            await verifier.verify(token)

    async def test_missing_subject_is_rejected(self, verifier, rsa_keys):
        token = _token(rsa_keys[0], sub="")

        with pytest.raises(UnauthorizedError, match="Invalid token"):
            await verifier.verify(token)

    async def test_garbage_is_rejected(self, verifier):
        with pytest.raises(UnauthorizedError):
            await verifier.verify("not-a-jwt")


class TestJwksVerification:
    @pytest.fixture
    def jwks(self, rsa_keys):
        key = jwk.construct(rsa_keys[1], algorithm="RS256").to_dict()
        key["kid"] = "key-1"
        return {"keys": [key]}

    def _verifier(self, handler, **kwargs) -> ClerkTokenVerifier:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ClerkTokenVerifier(
            jwks_url="https://clerk.test/.well-known/jwks.json", http_client=http, **kwargs
        )

    async def test_fetches_and_caches_keys(self, rsa_keys, jwks):
        fetches = []

        def handler(request: httpx.Request) -> httpx.Response:
            fetches.append(request.url.path)
            return httpx.Response(200, json=jwks)

        verifier = self._verifier(handler)
        token = _token(rsa_keys[0], kid="key-1")

        assert await verifier.verify(token) == "user_123"
        assert await verifier.verify(token) == "user_123"
        assert fetches == ["/.well-known/jwks.json"]

    async def test_unknown_kid_is_rejected(self, rsa_keys, jwks):
        verifier = self._verifier(lambda request: httpx.Response(200, json=jwks))

        with pytest.raises(UnauthorizedError):
            await verifier.verify(_token(rsa_keys[0], kid="rotated-away"))

    async def test_jwks_outage_is_external_error(self, rsa_keys):
        verifier = self._verifier(lambda request: httpx.Response(500))

        with pytest.raises(ExternalServiceError):
            await verifier.verify(_token(rsa_keys[0], kid="key-1"))

    async def test_unknown_kids_do_not_refetch_within_interval(self, rsa_keys, jwks):
        fetches = []

        def handler(request: httpx.Request) -> httpx.Response:
            fetches.append(request.url.path)
            return httpx.Response(200, json=jwks)

        verifier = self._verifier(handler)

        for kid in ("forged-1", "forged-2", "forged-3"):
            with pytest.raises(UnauthorizedError):
                await verifier.verify(_token(rsa_keys[0], kid=kid))

        assert len(fetches) == 1

    async def test_rotated_key_is_picked_up_after_interval(self, rsa_keys, jwks):
        rotated = {"keys": [dict(jwks["keys"][0], kid="key-2")]}
        responses = [jwks, rotated]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=responses.pop(0))

        verifier = self._verifier(handler, jwks_refresh_interval=0)

        assert await verifier.verify(_token(rsa_keys[0], kid="key-1")) == "user_123"
        assert await verifier.verify(_token(rsa_keys[0], kid="key-2")) == "user_123"
        assert responses == []
