"""Models module exporting all database models."""

from .media import MediaFile, tour_gallery_images
from .permission import AUTHENTICATED_ROLE, PUBLIC_ROLE, Permission, Role
from .room_type import RoomType
from .store import StoreEntry
from .tour import Tour, TourStatus
from .tour_date import Availability, TourDate
from .tour_highlight import TourHighlight
from .tour_inclusion import TourInclusion
from .tour_itinerary import TourItinerary

__all__ = [
    # Content types
    "Tour",
    "TourStatus",
    "TourHighlight",
    "TourInclusion",
    "TourItinerary",
    "RoomType",
    "TourDate",
    "Availability",

    # Media
    "MediaFile",
    "tour_gallery_images",

    # Access control
    "Role",
    "Permission",
    "PUBLIC_ROLE",
    "AUTHENTICATED_ROLE",

    # Core store
    "StoreEntry",
]
