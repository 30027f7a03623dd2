"""Role and permission models for content API access."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import utcnow

PUBLIC_ROLE = "public"
AUTHENTICATED_ROLE = "authenticated"


class Role(Base):
    """Permission group; ``type`` is the stable lookup key."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    permissions: Mapped[list["Permission"]] = relationship(
        "Permission",
        back_populates="role",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, type='{self.type}')>"


class Permission(Base):
    """Grant of one action (e.g. ``api::tour.tour.find``) to one role."""

    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    action: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    role: Mapped[Role] = relationship(Role, back_populates="permissions", lazy="raise")

    __table_args__ = (
        UniqueConstraint("action", "role_id", name="uq_permission_action_role"),
    )

    def __repr__(self) -> str:
        return f"<Permission(id={self.id}, action='{self.action}', role_id={self.role_id})>"
