"""FastAPI application initialization and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import __version__
from .core.config import settings
from .core.database import close_db, engine, init_db, session_scope
from .core.exceptions import (
    ProblemDetailsException,
    generic_exception_handler,
    problem_details_handler,
)
from .core.middleware import setup_middleware
from .core.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_structured_logging,
    setup_tracing,
)
from .routers import content_routers, health_router, metrics_router
from .services.permission_service import PermissionService

setup_structured_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Creates tables, bootstraps the default roles and the media root on
    startup; disposes the engine on shutdown.
    """
    logger.info("Starting content API")
    logger.info(f"Environment: {settings.environment}")

    try:
        setup_tracing()
        instrument_sqlalchemy(engine)

        await init_db()
        async with session_scope() as session:
            await PermissionService(session).ensure_default_roles()
        settings.media_root.mkdir(parents=True, exist_ok=True)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down content API")
    await close_db()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Traverse Content API",
        description="Read-only REST endpoints over tour content: tours, highlights, inclusions, itineraries, room types and tour dates",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    setup_middleware(app, enable_logging=True)
    instrument_fastapi(app)

    app.add_exception_handler(ProblemDetailsException, problem_details_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router)
    app.include_router(metrics_router)
    for router in content_routers:
        app.include_router(router)

    # Directory is created at startup
    app.mount("/uploads", StaticFiles(directory=settings.media_root, check_dir=False), name="uploads")

    logger.info("FastAPI application created and configured")

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "traverse_content.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
