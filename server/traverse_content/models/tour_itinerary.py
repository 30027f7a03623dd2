"""Tour itinerary model definition."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import ContentMixin

if TYPE_CHECKING:
    from .tour import Tour


class TourItinerary(ContentMixin, Base):
    """One day of a tour's itinerary."""

    __tablename__ = "tour_itineraries"

    tour_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    run: Mapped[str | None] = mapped_column(String(255), nullable=True)  # distance and elevation
    meals: Mapped[str | None] = mapped_column(String(255), nullable=True)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False, default=0)

    tour: Mapped["Tour"] = relationship("Tour", back_populates="itinerary", lazy="raise")

    def __repr__(self) -> str:
        return f"<TourItinerary(id={self.id}, tour_id={self.tour_id}, day='{self.day}')>"
