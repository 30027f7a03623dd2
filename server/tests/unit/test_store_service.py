"""Unit tests for the core store."""

import pytest

from traverse_content.services.store_service import CoreStore


@pytest.mark.asyncio
async def test_unset_key_is_none(test_session):
    """Test reading a key that was never written."""
    store = CoreStore(test_session, "test", type="type", name="setup")

    assert await store.get("tourDataHasRun") is None


@pytest.mark.asyncio
async def test_set_then_overwrite(test_session):
    """Test that values are JSON encoded and upserted."""
    store = CoreStore(test_session, "test", type="type", name="setup")

    await store.set("tourDataHasRun", True)
    assert await store.get("tourDataHasRun") is True

    await store.set("tourDataHasRun", {"at": "2025-01-01"})
    assert await store.get("tourDataHasRun") == {"at": "2025-01-01"}


@pytest.mark.asyncio
async def test_keys_are_scoped_by_environment(test_session):
    """Test that environments do not share values."""
    await CoreStore(test_session, "development", type="type", name="setup").set("tourDataHasRun", True)

    assert await CoreStore(test_session, "production", type="type", name="setup").get("tourDataHasRun") is None
