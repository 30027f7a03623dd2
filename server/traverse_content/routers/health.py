"""Health check router."""

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["health"])


@router.get(
    "/_health",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Health Check",
    response_class=Response,
)
async def health() -> Response:
    """Liveness probe; answers 204 with an empty body."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
