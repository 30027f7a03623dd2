"""Parsing of REST query parameters (populate, sort, filters, pagination)."""

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

from pydantic.alias_generators import to_snake
from sqlalchemy import inspect

from ..content_types import ContentType
from ..core.exceptions import ValidationError
from ..schemas.common import Pagination

_POPULATE_INDEXED = re.compile(r"^populate\[\d+\]$")
_SORT_INDEXED = re.compile(r"^sort\[\d+\]$")
_FILTER = re.compile(r"^filters\[(?P<field>[A-Za-z_][A-Za-z0-9_]*)\](?:\[\$(?P<op>[a-z]+)\])?$")

# Largest value a 64-bit INTEGER column holds
MAX_INTEGER = 2**63 - 1


@dataclass
class QueryParams:
    populate: list[str] = field(default_factory=list)
    sort: list[tuple[str, str]] = field(default_factory=list)
    filters: dict[str, Any] = field(default_factory=dict)
    page: int = 1
    page_size: int = 25

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def column_attribute(content_type: ContentType, name: str):
    """Resolve a camelCase or snake_case field name to a mapped column attribute."""
    key = to_snake(name)
    columns = inspect(content_type.model).column_attrs
    if key not in columns:
        raise ValidationError(
            detail=f"Invalid field '{name}' for {content_type.singular_name}",
            errors=[{"path": name, "message": "unknown field"}],
        )
    return getattr(content_type.model, key)


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_populate(params: Mapping[str, str], multi, content_type: ContentType) -> list[str]:
    requested: list[str] = []
    for value in multi("populate"):
        requested.extend(_split(value))
    for key in params:
        if _POPULATE_INDEXED.match(key):
            requested.extend(_split(params[key]))

    if "*" in requested:
        return [relation.name for relation in content_type.relations]

    populate = []
    for name in requested:
        if content_type.relation(name) is None:
            raise ValidationError(
                detail=f"Invalid populate field '{name}'",
                errors=[{"path": "populate", "message": f"'{name}' is not a relation of {content_type.singular_name}"}],
            )
        if name not in populate:
            populate.append(name)
    return populate


def _parse_sort(params: Mapping[str, str], multi, content_type: ContentType) -> list[tuple[str, str]]:
    entries: list[str] = []
    for value in multi("sort"):
        entries.extend(_split(value))
    for key in params:
        if _SORT_INDEXED.match(key):
            entries.extend(_split(params[key]))

    sort = []
    for entry in entries:
        name, _, direction = entry.partition(":")
        direction = (direction or "asc").lower()
        if direction not in ("asc", "desc"):
            raise ValidationError(
                detail=f"Invalid sort direction '{direction}'",
                errors=[{"path": "sort", "message": "direction must be asc or desc"}],
            )
        column_attribute(content_type, name)
        sort.append((to_snake(name), direction))
    return sort


def _coerce(content_type: ContentType, name: str, raw: str) -> Any:
    column_attribute(content_type, name)
    column = inspect(content_type.model).columns[to_snake(name)]
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw

    try:
        if python_type is bool:
            if raw.lower() not in ("true", "false", "1", "0"):
                raise ValueError(raw)
            return raw.lower() in ("true", "1")
        if python_type is int:
            value = int(raw)
            if not -MAX_INTEGER - 1 <= value <= MAX_INTEGER:
                raise ValueError(raw)
            return value
        if python_type is float:
            return float(raw)
        if python_type is datetime:
            return datetime.fromisoformat(raw)
        if python_type is date:
            return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(
            detail=f"Invalid value '{raw}' for filter '{name}'",
            errors=[{"path": f"filters.{name}", "message": f"expected {python_type.__name__}"}],
        ) from None
    return raw


def _parse_filters(params: Mapping[str, str], content_type: ContentType) -> dict[str, Any]:
    filters = {}
    for key, raw in params.items():
        if not key.startswith("filters["):
            continue
        match = _FILTER.match(key)
        if not match:
            raise ValidationError(
                detail=f"Invalid filter '{key}'",
                errors=[{"path": key, "message": "expected filters[field] or filters[field][$eq]"}],
            )
        op = match.group("op") or "eq"
        if op != "eq":
            raise ValidationError(
                detail=f"Unsupported filter operator '${op}'",
                errors=[{"path": key, "message": "only $eq is supported"}],
            )
        name = match.group("field")
        filters[to_snake(name)] = _coerce(content_type, name, raw)
    return filters


def _parse_positive_int(params: Mapping[str, str], key: str, default: int) -> int:
    raw = params.get(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if not 1 <= value <= MAX_INTEGER:
        raise ValidationError(
            detail=f"'{key}' must be a positive integer",
            errors=[{"path": key, "message": "must be a positive integer"}],
        )
    return value


def parse_query(
    params,
    content_type: ContentType,
    default_page_size: int = 25,
    max_page_size: int = 100,
) -> QueryParams:
    """
    Parse a request's query string for a content-type collection.

    Args:
        params: Starlette ``QueryParams`` (or any mapping with ``getlist``)
        content_type: Content type being queried
        default_page_size: Page size when ``pagination[pageSize]`` is absent
        max_page_size: Upper bound applied to ``pagination[pageSize]``

    Raises:
        ValidationError: On unknown relations or fields, or malformed values
    """
    multi = params.getlist if hasattr(params, "getlist") else (lambda key: [params[key]] if key in params else [])

    page_size = min(_parse_positive_int(params, "pagination[pageSize]", default_page_size), max_page_size)
    page = _parse_positive_int(params, "pagination[page]", 1)
    if (page - 1) * page_size > MAX_INTEGER:
        raise ValidationError(
            detail="'pagination[page]' is out of range",
            errors=[{"path": "pagination[page]", "message": "page offset exceeds the largest row offset"}],
        )

    return QueryParams(
        populate=_parse_populate(params, multi, content_type),
        sort=_parse_sort(params, multi, content_type),
        filters=_parse_filters(params, content_type),
        page=page,
        page_size=page_size,
    )


def pagination_meta(page: int, page_size: int, total: int) -> Pagination:
    """Pagination metadata for a page of a collection."""
    return Pagination(
        page=page,
        page_size=page_size,
        page_count=math.ceil(total / page_size) if total else 0,
        total=total,
    )
