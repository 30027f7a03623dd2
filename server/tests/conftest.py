"""Test configuration and fixtures."""

import os

# Settings are read at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from traverse_content.core.database import Base, get_db  # noqa: E402
from traverse_content.models import *  # noqa: E402,F403 - Import all models
from traverse_content.seed import data as seed_data  # noqa: E402
from traverse_content.services.permission_service import PermissionService  # noqa: E402

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Smallest valid JPEG; content is irrelevant to the uploader
JPEG_BYTES = bytes.fromhex(
    "ffd8ffe000104a46494600010101004800480000ffdb004300"
    + "ff" * 64
    + "ffc2000b080001000101011100ffc40014100100000000000000000000000000000000ffda0008010100013f10"
)


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session with the default roles in place."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        await PermissionService(session).ensure_default_roles()
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """Boot the application against the test database."""
    from traverse_content.main import create_app

    app = create_app()

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def set_public_permissions(test_session):
    """Grant the public role actions, e.g. ``{"room-type": ["find"]}``."""

    async def _set(new_permissions):
        return await PermissionService(test_session).set_public_permissions(new_permissions)

    return _set


@pytest.fixture
def uploads_dir(tmp_path):
    """Uploads directory holding every file the seed routine needs."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    for file_name in seed_data.ALL_MEDIA_FILES:
        (directory / file_name).write_bytes(JPEG_BYTES)
    return directory


@pytest.fixture
def media_root(tmp_path):
    return tmp_path / "media"


@pytest_asyncio.fixture
async def seeded(test_session, uploads_dir, media_root):
    """Run the tour seed once against the test database."""
    from traverse_content.seed import TourSeeder

    seeder = TourSeeder(
        test_session,
        uploads_dir=uploads_dir,
        media_root=media_root,
        environment="test",
        force=False,
    )
    imported = await seeder.run()
    assert imported is True
    return seeder


@pytest.fixture
def sample_tour_data():
    """Minimal published tour payload."""
    return {
        "title": "Test Traverse",
        "slug": "test-traverse",
        "location": "Mackenzie Country",
        "status": "published",
        "publishedAt": "2025-01-01T00:00:00+00:00",
    }
