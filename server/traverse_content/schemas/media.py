"""Media file schemas."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FileData(BaseModel):
    """Local file about to be uploaded."""

    filepath: Path
    original_file_name: str
    size: int
    mimetype: str


class FileInfo(BaseModel):
    """Descriptive metadata stored with an upload."""

    name: str
    alternative_text: Optional[str] = None
    caption: Optional[str] = None


class MediaAttributes(BaseModel):
    """Serialized media file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    document_id: str
    name: str
    alternative_text: Optional[str] = None
    caption: Optional[str] = None
    hash: str
    ext: str
    mime: str
    size: float
    url: str
    created_at: datetime
    updated_at: datetime
