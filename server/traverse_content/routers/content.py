"""Read-only REST routes generated for each content type."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..content_types import ContentType
from ..core.config import settings
from ..core.database import get_db
from ..core.dependencies import require_permission
from ..core.exceptions import NotFoundError, ProblemDetailsException
from ..schemas.common import CollectionResponse, EntryResponse, Problem
from ..services.document_service import DocumentService
from ..services.query import MAX_INTEGER, pagination_meta, parse_query
from ..services.serialization import serialize_entry

logger = logging.getLogger(__name__)

PROBLEM_RESPONSES = {
    400: {"model": Problem, "description": "Invalid query parameters"},
    401: {"model": Problem, "description": "Invalid API token"},
    403: {"model": Problem, "description": "Role lacks the permission"},
}


def build_content_router(content_type: ContentType) -> APIRouter:
    """
    Build the ``find`` and ``findOne`` routes for a content type.

    ``GET /api/<plural>`` lists published entries with populate, sort,
    filters and pagination. ``GET /api/<plural>/{id}`` returns one entry.
    Each route requires the matching permission on the caller's role.
    """
    router = APIRouter(prefix=f"/api/{content_type.plural_name}", tags=[content_type.singular_name])
    published_only = content_type.draft_and_publish

    @router.get(
        "",
        response_model=CollectionResponse,
        name=content_type.action("find"),
        responses=PROBLEM_RESPONSES,
        summary=f"List {content_type.plural_name}",
    )
    async def find(
        request: Request,
        db: AsyncSession = Depends(get_db),
        _role: str = Depends(require_permission(content_type.action("find"))),
    ) -> dict:
        query = parse_query(
            request.query_params,
            content_type,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        )
        service = DocumentService(db, content_type)

        try:
            total = await service.count(where=query.filters, published_only=published_only)
            entries = await service.find_many(
                where=query.filters,
                sort=query.sort,
                populate=query.populate,
                published_only=published_only,
                offset=query.offset,
                limit=query.page_size,
            )
        except ProblemDetailsException:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error listing entries",
                extra={
                    "content_type": content_type.singular_name,
                    "query": str(request.query_params),
                    "error": str(e),
                },
                exc_info=True,
            )
            raise HTTPException(status_code=500, detail="Internal server error")

        return {
            "data": [
                serialize_entry(content_type, entry, query.populate, published_only)
                for entry in entries
            ],
            "meta": {
                "pagination": pagination_meta(query.page, query.page_size, total).model_dump(by_alias=True)
            },
        }

    @router.get(
        "/{entry_id}",
        response_model=EntryResponse,
        name=content_type.action("findOne"),
        responses={**PROBLEM_RESPONSES, 404: {"model": Problem, "description": "Entry not found"}},
        summary=f"Get one {content_type.singular_name}",
    )
    async def find_one(
        entry_id: int,
        request: Request,
        db: AsyncSession = Depends(get_db),
        _role: str = Depends(require_permission(content_type.action("findOne"))),
    ) -> dict:
        query = parse_query(request.query_params, content_type)
        entry = None
        # Ids beyond the INTEGER range cannot exist
        if abs(entry_id) <= MAX_INTEGER:
            entry = await DocumentService(db, content_type).find_one(
                entry_id, populate=query.populate, published_only=published_only
            )
        if entry is None:
            raise NotFoundError(resource_type=content_type.singular_name, resource_id=str(entry_id))

        return {
            "data": serialize_entry(content_type, entry, query.populate, published_only),
            "meta": {},
        }

    return router
