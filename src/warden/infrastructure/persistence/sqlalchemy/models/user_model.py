"""SQLAlchemy model for User aggregates."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """User profile row, one per credential."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    auth_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("credentials.id"),
        unique=True,
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(20), default="USER", nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, auth_id={self.auth_id}, role={self.role})>"
