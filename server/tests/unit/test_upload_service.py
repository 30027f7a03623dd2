"""Unit tests for the upload service."""

import pytest
from sqlalchemy import func, select

from traverse_content.models import MediaFile
from traverse_content.services.upload_service import UploadService, strip_extension


@pytest.fixture
def upload_service(test_session, uploads_dir, media_root):
    return UploadService(test_session, uploads_dir=uploads_dir, media_root=media_root)


async def _media_count(session) -> int:
    return (await session.execute(select(func.count()).select_from(MediaFile))).scalar_one()


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("coffee-art.jpg", "coffee-art"),
        ("what-s-inside-a-black-hole.jpg", "what-s-inside-a-black-hole"),
        ("archive.tar.gz", "archive"),
        ("README", "README"),
    ],
)
def test_strip_extension(file_name, expected):
    """Test that everything from the first dot is removed."""
    assert strip_extension(file_name) == expected


def test_get_file_data(upload_service, uploads_dir):
    """Test describing a file in the uploads directory."""
    file_data = upload_service.get_file_data("coffee-art.jpg")

    assert file_data.filepath == uploads_dir / "coffee-art.jpg"
    assert file_data.original_file_name == "coffee-art.jpg"
    assert file_data.size == (uploads_dir / "coffee-art.jpg").stat().st_size
    assert file_data.mimetype == "image/jpeg"


def test_get_file_data_missing_file(upload_service):
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        upload_service.get_file_data("no-such-file.jpg")


@pytest.mark.asyncio
async def test_upload_file(upload_service, media_root):
    """Test uploading a file stores it under the media root."""
    media_file = await upload_service.upload_file("coffee-beans.jpg")

    assert media_file.id is not None
    assert media_file.name == "coffee-beans"
    assert media_file.caption == "coffee-beans"
    assert media_file.alternative_text == "An image uploaded to Traverse called coffee-beans"
    assert media_file.ext == ".jpg"
    assert media_file.mime == "image/jpeg"
    assert media_file.url == f"/uploads/{media_file.hash}.jpg"
    assert (media_root / f"{media_file.hash}.jpg").exists()


@pytest.mark.asyncio
async def test_single_name_returns_single_file(upload_service):
    """Test that one file name resolves to one media file, not a list."""
    result = await upload_service.check_file_exists_before_upload(["beautiful-picture.jpg"])

    assert isinstance(result, MediaFile)
    assert result.name == "beautiful-picture"


@pytest.mark.asyncio
async def test_several_names_return_list(upload_service):
    """Test that several file names resolve to a list in request order."""
    result = await upload_service.check_file_exists_before_upload(
        ["coffee-art.jpg", "coffee-beans.jpg"]
    )

    assert isinstance(result, list)
    assert [media_file.name for media_file in result] == ["coffee-art", "coffee-beans"]


@pytest.mark.asyncio
async def test_existing_files_are_reused(upload_service, test_session):
    """Test that files already stored by name are not uploaded again."""
    first = await upload_service.check_file_exists_before_upload(["coffee-art.jpg"])
    assert await _media_count(test_session) == 1

    again = await upload_service.check_file_exists_before_upload(["coffee-art.jpg"])

    assert again.id == first.id
    assert await _media_count(test_session) == 1


@pytest.mark.asyncio
async def test_existing_files_come_first(upload_service):
    """Test that reused files precede newly uploaded ones."""
    existing = await upload_service.check_file_exists_before_upload(["coffee-shadow.jpg"])

    result = await upload_service.check_file_exists_before_upload(
        ["coffee-art.jpg", "coffee-shadow.jpg"]
    )

    assert [media_file.name for media_file in result] == ["coffee-shadow", "coffee-art"]
    assert result[0].id == existing.id


@pytest.mark.asyncio
async def test_missing_file_fails_upload(upload_service, test_session):
    """Test that an absent file propagates FileNotFoundError and stores nothing."""
    with pytest.raises(FileNotFoundError):
        await upload_service.check_file_exists_before_upload(["missing.jpg"])

    assert await _media_count(test_session) == 0
