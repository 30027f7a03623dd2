"""Document service: create and query entries of any registered content type."""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

import pydantic
from pydantic.alias_generators import to_snake
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..content_types import MEDIA, ContentType, Relation, get_content_type
from ..core.database import Base
from ..core.exceptions import ConflictError, ValidationError
from ..core.observability import metrics_collector
from ..models import MediaFile
from .query import column_attribute

logger = logging.getLogger(__name__)


def _target_model(relation: Relation):
    if relation.target == MEDIA:
        return MediaFile
    return get_content_type(relation.target).model


class DocumentService:
    """Service for content entries of one content type."""

    def __init__(self, db: AsyncSession, content_type: ContentType | str):
        self.db = db
        self.content_type = (
            content_type if isinstance(content_type, ContentType) else get_content_type(content_type)
        )
        self.model = self.content_type.model

    async def create(self, data: Mapping[str, Any]) -> Base:
        """
        Create a new entry.

        Args:
            data: Field payload; camelCase or snake_case keys, relations by id

        Returns:
            Created entity

        Raises:
            ValidationError: If the payload is invalid or a relation id is missing
            ConflictError: If a unique field (e.g. slug) is already taken
        """
        try:
            payload = self.content_type.create_schema.model_validate(dict(data))
        except pydantic.ValidationError as e:
            raise ValidationError(
                detail=f"Invalid {self.content_type.singular_name} payload",
                errors=[
                    {"path": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                    for error in e.errors()
                ],
            ) from e

        values = payload.model_dump()
        collections: dict[str, list] = {}
        for relation in self.content_type.relations:
            key = to_snake(relation.name)
            if key not in values:
                continue
            value = values.pop(key)
            if relation.many:
                collections[relation.attribute] = await self._load_targets(relation, value)
            elif relation.foreign_key:
                if value is not None:
                    await self._ensure_target_exists(relation, value)
                values[relation.foreign_key] = value

        entity = self.model(**values)
        for attribute, items in collections.items():
            setattr(entity, attribute, items)

        self.db.add(entity)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                "Entry creation failed due to integrity constraint",
                extra={"content_type": self.content_type.singular_name, "error": str(e.orig)},
            )
            raise ConflictError(
                detail=f"{self.content_type.singular_name} entry conflicts with an existing entry",
                conflicting_resource={
                    key: values[key] for key in ("slug", "name", "title") if key in values
                } or None,
            ) from e

        metrics_collector.record_entry_created(self.content_type.singular_name)
        logger.info(
            "Entry created",
            extra={
                "content_type": self.content_type.singular_name,
                "entry_id": entity.id,
                "published": entity.published_at is not None,
            },
        )
        return entity

    async def find_many(
        self,
        where: Optional[Mapping[str, Any]] = None,
        sort: Sequence[tuple[str, str]] = (),
        populate: Iterable[str] = (),
        published_only: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Base]:
        """
        Find entries matching equality where-clauses.

        Args:
            where: Field → value (a list/tuple/set value matches any member)
            sort: (field, "asc" | "desc") pairs; defaults to id ascending
            populate: Relation names to load
            published_only: Skip drafts
            offset: Rows to skip
            limit: Maximum rows to return
        """
        stmt = (
            select(self.model)
            .where(*self._conditions(where, published_only))
            .options(*self._load_options(populate))
        )

        order_by = [
            column_attribute(self.content_type, name).desc()
            if direction == "desc"
            else column_attribute(self.content_type, name).asc()
            for name, direction in sort
        ]
        stmt = stmt.order_by(*order_by, self.model.id)

        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(
        self,
        where: Optional[Mapping[str, Any]] = None,
        published_only: bool = False,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(*self._conditions(where, published_only))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def find_one(
        self,
        entry_id: int,
        populate: Iterable[str] = (),
        published_only: bool = False,
    ) -> Optional[Base]:
        entries = await self.find_many(
            where={"id": entry_id}, populate=populate, published_only=published_only, limit=1
        )
        return entries[0] if entries else None

    def _conditions(self, where: Optional[Mapping[str, Any]], published_only: bool) -> list:
        conditions = []
        for name, value in (where or {}).items():
            column = column_attribute(self.content_type, name)
            if isinstance(value, (list, tuple, set)):
                conditions.append(column.in_(list(value)))
            elif value is None:
                conditions.append(column.is_(None))
            else:
                conditions.append(column == value)

        if published_only and self.content_type.draft_and_publish:
            conditions.append(self.model.published_at.is_not(None))
        return conditions

    def _load_options(self, populate: Iterable[str]) -> list:
        options = []
        for name in populate:
            relation = self.content_type.relation(name)
            if relation is None:
                raise ValidationError(detail=f"Invalid populate field '{name}'")
            options.append(selectinload(getattr(self.model, relation.attribute)))
        return options

    async def _ensure_target_exists(self, relation: Relation, target_id: int) -> None:
        if await self.db.get(_target_model(relation), target_id) is None:
            raise ValidationError(
                detail=f"'{relation.name}' references a missing {relation.target} ({target_id})",
                errors=[{"path": relation.name, "message": f"no {relation.target} with id {target_id}"}],
            )

    async def _load_targets(self, relation: Relation, target_ids: Sequence[int]) -> list:
        if not target_ids:
            return []
        model = _target_model(relation)
        result = await self.db.execute(select(model).where(model.id.in_(list(target_ids))))
        by_id = {item.id: item for item in result.scalars().all()}

        missing = [target_id for target_id in target_ids if target_id not in by_id]
        if missing:
            raise ValidationError(
                detail=f"'{relation.name}' references missing {relation.target} entries",
                errors=[{"path": relation.name, "message": f"missing ids: {missing}"}],
            )
        return [by_id[target_id] for target_id in dict.fromkeys(target_ids)]
