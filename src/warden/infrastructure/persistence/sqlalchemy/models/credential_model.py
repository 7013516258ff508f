"""SQLAlchemy model for Credential aggregates."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CredentialModel(Base, TimestampMixin):
    """Email + password hash. The unique index on email arbitrates signups."""

    __tablename__ = "credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<CredentialModel(id={self.id}, email={self.email})>"
