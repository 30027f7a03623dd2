"""FastAPI routers package."""

from ..content_types import CONTENT_TYPES
from .content import build_content_router
from .health import router as health_router
from .metrics import router as metrics_router

content_routers = [build_content_router(content_type) for content_type in CONTENT_TYPES.values()]

__all__ = [
    "build_content_router",
    "content_routers",
    "health_router",
    "metrics_router",
]
