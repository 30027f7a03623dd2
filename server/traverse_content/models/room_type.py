"""Room type model definition."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import ContentMixin

if TYPE_CHECKING:
    from .tour import Tour


class RoomType(ContentMixin, Base):
    """Accommodation option, optionally tied to a tour."""

    __tablename__ = "room_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    occupancy: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price: Mapped[str | None] = mapped_column(String(64), nullable=True)

    tour_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="SET NULL"), nullable=True, index=True
    )
    tour: Mapped[Optional["Tour"]] = relationship("Tour", back_populates="room_types", lazy="raise")

    __table_args__ = (
        CheckConstraint("occupancy IS NULL OR occupancy > 0", name="ck_room_type_occupancy_positive"),
    )

    def __repr__(self) -> str:
        return f"<RoomType(id={self.id}, name='{self.name}', tour_id={self.tour_id})>"
