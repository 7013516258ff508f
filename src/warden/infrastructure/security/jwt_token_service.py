"""JWT token service.

Signs and verifies bearer tokens carrying ``{authId, userId, role}``.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from warden.domain.auth import InvalidTokenError, TokenClaims, TokenService
from warden.domain.user import UserRole


class JWTTokenService(TokenService):
    """HS256 JWT issuer/verifier.

    The secret is handed in once at construction and never logged or
    included in error messages.

    Examples
    --------
    >>> service = JWTTokenService(secret_key="your-secret-key")
    >>> token = service.issue(TokenClaims(auth_id, user_id, UserRole.USER))
    >>> service.verify(token).user_id == user_id
    True
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)

    def issue(
        self,
        claims: TokenClaims,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token.

        Parameters
        ----------
        claims
            Identity and role to embed
        expires_delta
            Custom lifetime (optional), the configured default otherwise

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(claims.user_id),
            "authId": str(claims.auth_id),
            "userId": str(claims.user_id),
            "role": claims.role.value,
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self._expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )

            return TokenClaims(
                auth_id=UUID(payload["authId"]),
                user_id=UUID(payload["userId"]),
                role=UserRole(payload["role"]),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token", details={"reason": str(e)}) from e
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidTokenError(
                "Malformed token payload",
                details={"reason": str(e)},
            ) from e
