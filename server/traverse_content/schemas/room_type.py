"""Room type schemas."""

from typing import Optional

from pydantic import Field

from .base import CreateEntryRequest, EntryAttributes


class CreateRoomTypeRequest(CreateEntryRequest):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    occupancy: Optional[int] = Field(None, gt=0)
    price: Optional[str] = None
    tour: Optional[int] = None


class RoomTypeAttributes(EntryAttributes):
    name: str
    description: Optional[str] = None
    occupancy: Optional[int] = None
    price: Optional[str] = None
