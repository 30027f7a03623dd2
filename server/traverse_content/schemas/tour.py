"""Tour and tour child-collection schemas."""

from typing import List, Optional

from pydantic import Field

from ..models.tour import TourStatus
from .base import CreateEntryRequest, EntryAttributes


class CreateTourRequest(CreateEntryRequest):
    """Request schema for creating a tour."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z0-9-]+$", description="URL-friendly slug")
    location: Optional[str] = None
    duration: Optional[str] = None
    group_size: Optional[str] = None
    difficulty: Optional[str] = None
    price: Optional[str] = None
    distance: Optional[str] = None
    elevation: Optional[str] = None
    status: TourStatus = TourStatus.DRAFT
    featured: bool = False
    show_button: bool = True
    show_price: bool = True
    short_description: Optional[str] = None
    description: Optional[str] = None
    meta_title: Optional[str] = Field(None, max_length=255)
    meta_description: Optional[str] = None

    # Relations by id
    hero_image: Optional[int] = None
    gallery_images: List[int] = Field(default_factory=list)


class TourAttributes(EntryAttributes):
    title: str
    slug: str
    location: Optional[str] = None
    duration: Optional[str] = None
    group_size: Optional[str] = None
    difficulty: Optional[str] = None
    price: Optional[str] = None
    distance: Optional[str] = None
    elevation: Optional[str] = None
    status: TourStatus
    featured: bool
    show_button: bool
    show_price: bool
    short_description: Optional[str] = None
    description: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class CreateTourHighlightRequest(CreateEntryRequest):
    tour: int
    text: str = Field(..., min_length=1)
    order: int = Field(0, ge=0)


class TourHighlightAttributes(EntryAttributes):
    text: str
    order: int


class CreateTourInclusionRequest(CreateEntryRequest):
    tour: int
    text: str = Field(..., min_length=1)
    order: int = Field(0, ge=0)


class TourInclusionAttributes(EntryAttributes):
    text: str
    order: int


class CreateTourItineraryRequest(CreateEntryRequest):
    tour: int
    day: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    run: Optional[str] = Field(None, description="Distance and elevation for the day")
    meals: Optional[str] = None
    order: int = Field(0, ge=0)


class TourItineraryAttributes(EntryAttributes):
    day: str
    description: Optional[str] = None
    run: Optional[str] = None
    meals: Optional[str] = None
    order: int
