"""Tour highlight model definition."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import ContentMixin

if TYPE_CHECKING:
    from .tour import Tour


class TourHighlight(ContentMixin, Base):
    """Ordered highlight bullet belonging to one tour."""

    __tablename__ = "tour_highlights"

    tour_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False, default=0)

    tour: Mapped["Tour"] = relationship("Tour", back_populates="highlights", lazy="raise")

    def __repr__(self) -> str:
        return f"<TourHighlight(id={self.id}, tour_id={self.tour_id}, order={self.order})>"
