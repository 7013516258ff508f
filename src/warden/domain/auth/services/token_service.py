"""Token issuer/verifier interface."""

from abc import ABC, abstractmethod

from warden.domain.auth.value_objects.token_claims import TokenClaims


class TokenService(ABC):
    """Signs and verifies time-bounded bearer tokens."""

    @abstractmethod
    def issue(self, claims: TokenClaims) -> str:
        """Return a signed token carrying ``claims``."""

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Return the claims of a valid token.

        Raises InvalidTokenError for bad signatures, malformed payloads
        and expired tokens.
        """
