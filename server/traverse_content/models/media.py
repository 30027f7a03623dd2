"""Uploaded media file model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from .base import new_document_id, utcnow

# Gallery images: many-to-many between tours and files, read back in file id order
tour_gallery_images = Table(
    "tour_gallery_images",
    Base.metadata,
    Column("tour_id", Integer, ForeignKey("tours.id", ondelete="CASCADE"), primary_key=True),
    Column("file_id", Integer, ForeignKey("media_files.id", ondelete="CASCADE"), primary_key=True),
)


class MediaFile(Base):
    """A stored media file and its descriptor."""

    __tablename__ = "media_files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    document_id: Mapped[str] = mapped_column(
        String(24), nullable=False, unique=True, default=new_document_id
    )

    # File name without extension; the uploader looks files up by it
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    alternative_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    hash: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    ext: Mapped[str] = mapped_column(String(16), nullable=False)
    mime: Mapped[str] = mapped_column(String(127), nullable=False, default="")
    size: Mapped[float] = mapped_column(Float, nullable=False)  # kilobytes
    url: Mapped[str] = mapped_column(String(512), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<MediaFile(id={self.id}, name='{self.name}', url='{self.url}')>"
