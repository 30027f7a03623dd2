"""Serialization of entries into the ``{id, attributes}`` REST shape."""

from typing import Any, Iterable

from ..content_types import MEDIA, ContentType, Relation, get_content_type
from ..schemas.media import MediaAttributes


def _attributes_schema(target: str):
    if target == MEDIA:
        return MediaAttributes
    return get_content_type(target).attributes_schema


def _visible(item: Any, published_only: bool) -> bool:
    # Media files have no draft state
    return not published_only or getattr(item, "published_at", True) is not None


def _serialize_plain(schema, item) -> dict[str, Any]:
    return {
        "id": item.id,
        "attributes": schema.model_validate(item).model_dump(by_alias=True, mode="json"),
    }


def serialize_relation(relation: Relation, value: Any, published_only: bool = True) -> dict[str, Any]:
    """Serialize a loaded relation as ``{"data": ...}``; drafts become null or are dropped."""
    schema = _attributes_schema(relation.target)
    if relation.many:
        return {
            "data": [_serialize_plain(schema, item) for item in value if _visible(item, published_only)]
        }
    if value is None or not _visible(value, published_only):
        return {"data": None}
    return {"data": _serialize_plain(schema, value)}


def serialize_entry(
    content_type: ContentType,
    entity: Any,
    populate: Iterable[str] = (),
    published_only: bool = True,
) -> dict[str, Any]:
    """
    Serialize one entry with the requested relations populated.

    Relations must already be loaded on ``entity`` (see ``DocumentService``).
    """
    data = _serialize_plain(content_type.attributes_schema, entity)
    for name in populate:
        relation = content_type.relation(name)
        data["attributes"][name] = serialize_relation(
            relation, getattr(entity, relation.attribute), published_only
        )
    return data
