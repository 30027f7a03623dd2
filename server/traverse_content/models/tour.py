"""Tour model definition."""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base
from .base import ContentMixin
from .media import MediaFile, tour_gallery_images

if TYPE_CHECKING:
    from .room_type import RoomType
    from .tour_date import TourDate
    from .tour_highlight import TourHighlight
    from .tour_inclusion import TourInclusion
    from .tour_itinerary import TourItinerary


class TourStatus(str, Enum):
    """Marketing status of a tour, independent of draft/publish."""
    DRAFT = "draft"
    PUBLISHED = "published"
    COMING_SOON = "coming_soon"


class Tour(ContentMixin, Base):
    """Tour package offered by the operator."""

    __tablename__ = "tours"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    duration: Mapped[str | None] = mapped_column(String(255), nullable=True)
    group_size: Mapped[str | None] = mapped_column(String(64), nullable=True)
    difficulty: Mapped[str | None] = mapped_column(String(64), nullable=True)
    price: Mapped[str | None] = mapped_column(String(64), nullable=True)
    distance: Mapped[str | None] = mapped_column(String(64), nullable=True)
    elevation: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default=TourStatus.DRAFT.value)

    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    show_button: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_price: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    hero_image_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("media_files.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    hero_image: Mapped[MediaFile | None] = relationship(MediaFile, lazy="raise")
    gallery_images: Mapped[list[MediaFile]] = relationship(
        MediaFile,
        secondary=tour_gallery_images,
        order_by=MediaFile.id,
        lazy="raise",
    )
    highlights: Mapped[list["TourHighlight"]] = relationship(
        "TourHighlight",
        back_populates="tour",
        cascade="all, delete-orphan",
        order_by="TourHighlight.order",
        lazy="raise",
    )
    inclusions: Mapped[list["TourInclusion"]] = relationship(
        "TourInclusion",
        back_populates="tour",
        cascade="all, delete-orphan",
        order_by="TourInclusion.order",
        lazy="raise",
    )
    itinerary: Mapped[list["TourItinerary"]] = relationship(
        "TourItinerary",
        back_populates="tour",
        cascade="all, delete-orphan",
        order_by="TourItinerary.order",
        lazy="raise",
    )
    room_types: Mapped[list["RoomType"]] = relationship(
        "RoomType",
        back_populates="tour",
        order_by="RoomType.id",
        lazy="raise",
    )
    tour_dates: Mapped[list["TourDate"]] = relationship(
        "TourDate",
        back_populates="tour",
        order_by="TourDate.start_date",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, title='{self.title}', slug='{self.slug}')>"
