"""Base schemas shared by every content type."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import CamelModel


class CreateEntryRequest(CamelModel):
    """Payload accepted by the document service when creating an entry."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
        validate_default=True,
    )

    published_at: Optional[datetime] = Field(None, description="Publication time; omit to create a draft")


class EntryAttributes(CamelModel):
    """Attributes common to every serialized content entry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    document_id: str
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None
