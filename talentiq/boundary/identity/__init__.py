"""Identity provider boundary."""

from talentiq.boundary.identity.clerk_verifier import ClerkTokenVerifier

__all__ = ["ClerkTokenVerifier"]
