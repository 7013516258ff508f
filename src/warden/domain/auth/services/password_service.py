"""Password hashing service interface."""

from abc import ABC, abstractmethod


class PasswordService(ABC):
    """One-way password hashing with a minimum-strength policy gate."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh random salt."""

    @abstractmethod
    def compare(self, password: str, password_hash: str) -> bool:
        """Return True iff ``password`` matches ``password_hash``.

        Implementations must delegate to a constant-time primitive.
        """

    @abstractmethod
    def validate_policy(self, password: str | None) -> bool:
        """Return False (never raise) when the password is too weak."""
