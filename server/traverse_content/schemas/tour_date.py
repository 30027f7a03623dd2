"""Tour date schemas."""

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from ..models.tour_date import Availability
from .base import CreateEntryRequest, EntryAttributes


class CreateTourDateRequest(CreateEntryRequest):
    start_date: date
    end_date: Optional[date] = None
    spots_available: Optional[int] = Field(None, ge=0)
    availability: Availability = Availability.AVAILABLE
    price: Optional[str] = None
    tour: Optional[int] = None

    @model_validator(mode="after")
    def validate_date_range(self) -> "CreateTourDateRequest":
        """End date must not precede the start date."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must be on or after startDate")
        return self


class TourDateAttributes(EntryAttributes):
    start_date: date
    end_date: Optional[date] = None
    spots_available: Optional[int] = None
    availability: Availability
    price: Optional[str] = None
