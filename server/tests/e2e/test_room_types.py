"""Room types API tests."""

import pytest
import pytest_asyncio

from traverse_content.services import DocumentService


@pytest_asyncio.fixture
async def public_room_types(set_public_permissions):
    await set_public_permissions({"room-type": ["find", "findOne"]})


@pytest.mark.asyncio
async def test_list_room_types_returns_data_array(test_client, public_room_types):
    """Test GET /api/room-types returns 200 and a data array."""
    response = await test_client.get("/api/room-types")

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["data"], list)
    assert body["meta"]["pagination"]["total"] == 0


@pytest.mark.asyncio
async def test_list_room_types_populates_tour(test_client, test_session, public_room_types, sample_tour_data):
    """Test GET /api/room-types?populate=tour includes the tour relation."""
    tour = await DocumentService(test_session, "tour").create(sample_tour_data)
    await DocumentService(test_session, "room-type").create({
        "name": "Twin share",
        "occupancy": 2,
        "price": "$995",
        "tour": tour.id,
        "publishedAt": "2025-01-01T00:00:00+00:00",
    })

    response = await test_client.get("/api/room-types?populate=tour")

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    item = data[0]
    assert "attributes" in item
    assert item["attributes"]["name"] == "Twin share"
    assert item["attributes"]["tour"]["data"]["id"] == tour.id
    assert item["attributes"]["tour"]["data"]["attributes"]["slug"] == sample_tour_data["slug"]


@pytest.mark.asyncio
async def test_draft_tour_relation_is_null(test_client, test_session, public_room_types, sample_tour_data):
    """Test that a populated relation to a draft tour is returned as null."""
    draft = await DocumentService(test_session, "tour").create({**sample_tour_data, "publishedAt": None})
    await DocumentService(test_session, "room-type").create({
        "name": "Single",
        "tour": draft.id,
        "publishedAt": "2025-01-01T00:00:00+00:00",
    })

    response = await test_client.get("/api/room-types?populate=tour")

    assert response.status_code == 200
    assert response.json()["data"][0]["attributes"]["tour"] == {"data": None}


@pytest.mark.asyncio
async def test_draft_room_types_are_hidden(test_client, test_session, public_room_types):
    """Test that unpublished room types are not listed."""
    await DocumentService(test_session, "room-type").create({"name": "Draft room"})

    response = await test_client.get("/api/room-types")

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_find_one_room_type(test_client, test_session, public_room_types):
    """Test GET /api/room-types/{id} returns the entry."""
    room = await DocumentService(test_session, "room-type").create({
        "name": "Triple share",
        "occupancy": 3,
        "publishedAt": "2025-01-01T00:00:00+00:00",
    })

    response = await test_client.get(f"/api/room-types/{room.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["id"] == room.id
    assert body["data"]["attributes"]["occupancy"] == 3
    assert body["meta"] == {}


@pytest.mark.asyncio
async def test_find_one_missing_room_type(test_client, public_room_types):
    """Test GET /api/room-types/{id} for an unknown id returns 404."""
    response = await test_client.get("/api/room-types/999")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/problem+json")


@pytest.mark.asyncio
async def test_room_types_forbidden_without_permission(test_client):
    """Test that the public role cannot list room types until granted."""
    response = await test_client.get("/api/room-types")

    assert response.status_code == 403
    problem = response.json()
    assert problem["status"] == 403
    assert problem["instance"] == "/api/room-types"
