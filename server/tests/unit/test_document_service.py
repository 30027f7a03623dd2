"""Unit tests for the document service."""

from datetime import datetime, timezone

import pytest

from traverse_content.content_types import UnknownContentTypeError
from traverse_content.core.exceptions import ConflictError, ValidationError
from traverse_content.services.document_service import DocumentService


@pytest.mark.asyncio
async def test_create_tour(test_session, sample_tour_data):
    """Test creating a tour from a camelCase payload."""
    service = DocumentService(test_session, "tour")

    tour = await service.create({**sample_tour_data, "groupSize": "8-14", "showPrice": False})

    assert tour.id is not None
    assert len(tour.document_id) == 24
    assert tour.title == sample_tour_data["title"]
    assert tour.group_size == "8-14"
    assert tour.show_price is False
    assert tour.status == "published"
    assert tour.is_published


@pytest.mark.asyncio
async def test_create_draft_by_default(test_session):
    """Test that omitting publishedAt creates a draft."""
    tour = await DocumentService(test_session, "tour").create({"title": "Draft", "slug": "draft"})

    assert tour.published_at is None
    assert tour.status == "draft"


@pytest.mark.asyncio
async def test_create_duplicate_slug(test_session, sample_tour_data):
    """Test creating a tour with a duplicate slug raises ConflictError."""
    service = DocumentService(test_session, "tour")
    await service.create(sample_tour_data)

    with pytest.raises(ConflictError):
        await service.create({**sample_tour_data, "title": "Different Tour"})


@pytest.mark.asyncio
async def test_create_rejects_unknown_fields(test_session, sample_tour_data):
    """Test that fields outside the content type are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        await DocumentService(test_session, "tour").create({**sample_tour_data, "capacity": 12})

    assert exc_info.value.status_code == 400
    assert exc_info.value.problem_details["errors"][0]["path"] == "capacity"


@pytest.mark.asyncio
async def test_create_rejects_missing_relation(test_session):
    """Test that a child entry pointing to a missing tour is rejected."""
    with pytest.raises(ValidationError):
        await DocumentService(test_session, "tour-highlight").create({"tour": 999, "text": "Nope"})


@pytest.mark.asyncio
async def test_create_rejects_missing_media(test_session, sample_tour_data):
    """Test that gallery ids must reference stored media."""
    with pytest.raises(ValidationError):
        await DocumentService(test_session, "tour").create({**sample_tour_data, "galleryImages": [1, 2]})


@pytest.mark.asyncio
async def test_create_tour_date_with_inverted_range(test_session):
    """Test that an end date before the start date is rejected."""
    with pytest.raises(ValidationError):
        await DocumentService(test_session, "tour-date").create(
            {"startDate": "2025-03-02", "endDate": "2025-03-01"}
        )


@pytest.mark.asyncio
async def test_find_many_by_slug(test_session, sample_tour_data):
    """Test equality lookups and the published-only flag."""
    service = DocumentService(test_session, "tour")
    await service.create(sample_tour_data)
    await service.create({"title": "Hidden", "slug": "hidden"})

    assert [tour.slug for tour in await service.find_many(where={"slug": "test-traverse"})] == [
        "test-traverse"
    ]
    assert len(await service.find_many()) == 2
    assert [tour.slug for tour in await service.find_many(published_only=True)] == ["test-traverse"]
    assert await service.count(published_only=True) == 1


@pytest.mark.asyncio
async def test_find_many_populates_children_in_order(test_session, sample_tour_data):
    """Test that child collections load ordered by their order field."""
    tour = await DocumentService(test_session, "tour").create(sample_tour_data)
    highlights = DocumentService(test_session, "tour-highlight")
    now = datetime.now(timezone.utc)
    for order, text in ((2, "second"), (1, "first"), (3, "third")):
        await highlights.create({"tour": tour.id, "text": text, "order": order, "publishedAt": now})

    test_session.expunge_all()
    [loaded] = await DocumentService(test_session, "tour").find_many(
        where={"id": tour.id}, populate=["highlights"]
    )

    assert [highlight.text for highlight in loaded.highlights] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_find_many_rejects_unknown_populate(test_session):
    """Test that populate names must be relations."""
    with pytest.raises(ValidationError):
        await DocumentService(test_session, "tour").find_many(populate=["guides"])


@pytest.mark.asyncio
async def test_find_one_missing(test_session):
    """Test that an unknown id returns None."""
    assert await DocumentService(test_session, "room-type").find_one(404) is None


def test_unknown_content_type(test_session):
    """Test that an unregistered content type is rejected."""
    with pytest.raises(UnknownContentTypeError):
        DocumentService(test_session, "booking")


@pytest.mark.asyncio
async def test_gallery_images_read_back_in_file_id_order(test_session, sample_tour_data, uploads_dir, media_root):
    """Test that a gallery loads ordered by file id, whatever order the ids were given in."""
    from traverse_content.services.upload_service import UploadService

    uploads = UploadService(test_session, uploads_dir=uploads_dir, media_root=media_root)
    first = await uploads.upload_file("coffee-art.jpg")
    second = await uploads.upload_file("coffee-beans.jpg")
    tour = await DocumentService(test_session, "tour").create(
        {**sample_tour_data, "galleryImages": [second.id, first.id]}
    )

    test_session.expunge_all()
    [loaded] = await DocumentService(test_session, "tour").find_many(
        where={"id": tour.id}, populate=["galleryImages"]
    )

    assert [media_file.id for media_file in loaded.gallery_images] == [first.id, second.id]
