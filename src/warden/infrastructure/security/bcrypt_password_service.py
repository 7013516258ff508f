"""Password hashing service using bcrypt."""

import bcrypt

from warden.domain.auth import PasswordService
from warden.domain.auth.aggregates.credential import MIN_PASSWORD_LENGTH


class BcryptPasswordService(PasswordService):
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.

    Examples
    --------
    >>> service = BcryptPasswordService()
    >>> hash = service.hash("my_secure_password")
    >>> service.compare("my_secure_password", hash)
    True
    >>> service.compare("wrong_password", hash)
    False
    """

    MIN_LENGTH = MIN_PASSWORD_LENGTH
    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use the minimum of 4 to stay fast.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def compare(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format or non-string input
            return False

    def validate_policy(self, password: str | None) -> bool:
        if not password or not isinstance(password, str):
            return False
        if len(password) < self.MIN_LENGTH:
            return False
        return len(password.encode("utf-8")) <= self.MAX_BYTES
