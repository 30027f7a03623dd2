"""Tour date model definition."""

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import ContentMixin

if TYPE_CHECKING:
    from .tour import Tour


class Availability(str, Enum):
    AVAILABLE = "available"
    LIMITED = "limited"
    SOLD_OUT = "sold_out"


class TourDate(ContentMixin, Base):
    """Scheduled running of a tour."""

    __tablename__ = "tour_dates"

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    spots_available: Mapped[int | None] = mapped_column(Integer, nullable=True)
    availability: Mapped[str] = mapped_column(
        String(32), nullable=False, default=Availability.AVAILABLE.value
    )
    price: Mapped[str | None] = mapped_column(String(64), nullable=True)

    tour_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="SET NULL"), nullable=True, index=True
    )
    tour: Mapped[Optional["Tour"]] = relationship("Tour", back_populates="tour_dates", lazy="raise")

    __table_args__ = (
        CheckConstraint("spots_available IS NULL OR spots_available >= 0", name="ck_tour_date_spots_non_negative"),
        CheckConstraint("end_date IS NULL OR end_date >= start_date", name="ck_tour_date_end_after_start"),
    )

    def __repr__(self) -> str:
        return f"<TourDate(id={self.id}, start_date={self.start_date}, tour_id={self.tour_id})>"
