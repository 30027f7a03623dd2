"""Common Pydantic schemas."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases while accepting field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(CamelModel):
    """Page-based pagination metadata."""

    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    page_count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class CollectionMeta(CamelModel):
    pagination: Pagination


class CollectionResponse(BaseModel):
    """Envelope returned by ``GET /api/<plural>``."""

    data: List[dict[str, Any]]
    meta: CollectionMeta


class EntryResponse(BaseModel):
    """Envelope returned by ``GET /api/<plural>/{id}``."""

    data: Optional[dict[str, Any]]
    meta: dict[str, Any] = Field(default_factory=dict)


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="Dotted path to the invalid field")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    errors: Optional[List[Violation]] = Field(None, description="Validation errors")
