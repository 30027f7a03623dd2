"""Content-type configuration.

Each content type ties an ORM model to its create/attribute schemas, its
relations and its REST names. The REST layer and the document service are
generated from this registry.
"""

from dataclasses import dataclass, field
from typing import Type

from pydantic import BaseModel

from .core.database import Base
from .models import RoomType, Tour, TourDate, TourHighlight, TourInclusion, TourItinerary
from .schemas.room_type import CreateRoomTypeRequest, RoomTypeAttributes
from .schemas.tour import (
    CreateTourHighlightRequest,
    CreateTourInclusionRequest,
    CreateTourItineraryRequest,
    CreateTourRequest,
    TourAttributes,
    TourHighlightAttributes,
    TourInclusionAttributes,
    TourItineraryAttributes,
)
from .schemas.tour_date import CreateTourDateRequest, TourDateAttributes

MEDIA = "plugin::upload.file"


class UnknownContentTypeError(LookupError):
    """Raised for a content-type name that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown content type '{name}'")
        self.name = name


@dataclass(frozen=True)
class Relation:
    """A relation field as exposed through the API."""

    name: str  # API field name, camelCase
    attribute: str  # ORM relationship attribute
    target: str  # singular content-type name, or MEDIA
    many: bool = False
    foreign_key: str | None = None  # column written when creating with an id


@dataclass(frozen=True)
class ContentType:
    singular_name: str
    plural_name: str
    model: Type[Base]
    create_schema: Type[BaseModel]
    attributes_schema: Type[BaseModel]
    relations: tuple[Relation, ...] = field(default_factory=tuple)
    draft_and_publish: bool = True

    @property
    def uid(self) -> str:
        return f"api::{self.singular_name}.{self.singular_name}"

    def action(self, action: str) -> str:
        """Permission action string, e.g. ``api::tour.tour.find``."""
        return f"{self.uid}.{action}"

    def relation(self, name: str) -> Relation | None:
        for relation in self.relations:
            if relation.name == name:
                return relation
        return None


_TOUR_CHILD = (Relation("tour", "tour", "tour", foreign_key="tour_id"),)

CONTENT_TYPES: dict[str, ContentType] = {
    ct.singular_name: ct
    for ct in (
        ContentType(
            singular_name="tour",
            plural_name="tours",
            model=Tour,
            create_schema=CreateTourRequest,
            attributes_schema=TourAttributes,
            relations=(
                Relation("heroImage", "hero_image", MEDIA, foreign_key="hero_image_id"),
                Relation("galleryImages", "gallery_images", MEDIA, many=True),
                Relation("highlights", "highlights", "tour-highlight", many=True),
                Relation("inclusions", "inclusions", "tour-inclusion", many=True),
                Relation("itinerary", "itinerary", "tour-itinerary", many=True),
                Relation("roomTypes", "room_types", "room-type", many=True),
                Relation("tourDates", "tour_dates", "tour-date", many=True),
            ),
        ),
        ContentType(
            singular_name="tour-highlight",
            plural_name="tour-highlights",
            model=TourHighlight,
            create_schema=CreateTourHighlightRequest,
            attributes_schema=TourHighlightAttributes,
            relations=_TOUR_CHILD,
        ),
        ContentType(
            singular_name="tour-inclusion",
            plural_name="tour-inclusions",
            model=TourInclusion,
            create_schema=CreateTourInclusionRequest,
            attributes_schema=TourInclusionAttributes,
            relations=_TOUR_CHILD,
        ),
        ContentType(
            singular_name="tour-itinerary",
            plural_name="tour-itineraries",
            model=TourItinerary,
            create_schema=CreateTourItineraryRequest,
            attributes_schema=TourItineraryAttributes,
            relations=_TOUR_CHILD,
        ),
        ContentType(
            singular_name="room-type",
            plural_name="room-types",
            model=RoomType,
            create_schema=CreateRoomTypeRequest,
            attributes_schema=RoomTypeAttributes,
            relations=_TOUR_CHILD,
        ),
        ContentType(
            singular_name="tour-date",
            plural_name="tour-dates",
            model=TourDate,
            create_schema=CreateTourDateRequest,
            attributes_schema=TourDateAttributes,
            relations=_TOUR_CHILD,
        ),
    )
}


def get_content_type(name: str) -> ContentType:
    """Look a content type up by singular name or ``api::x.x`` uid."""
    if name.startswith("api::"):
        name = name.removeprefix("api::").split(".", 1)[0]
    try:
        return CONTENT_TYPES[name]
    except KeyError:
        raise UnknownContentTypeError(name) from None
