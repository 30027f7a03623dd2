"""Media upload service with reuse of already stored files."""

import asyncio
import logging
import mimetypes
import re
import shutil
from pathlib import Path
from typing import Optional, Sequence
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.observability import metrics_collector
from ..models import MediaFile
from ..schemas.media import FileData, FileInfo

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"\..*$")
_UNSAFE = re.compile(r"[^a-z0-9]+")


def strip_extension(file_name: str) -> str:
    """``"coffee-art.min.jpg"`` → ``"coffee-art"``: everything from the first dot goes."""
    return _EXTENSION.sub("", file_name)


class UploadService:
    """Service for storing media files and finding existing ones."""

    def __init__(
        self,
        db: AsyncSession,
        uploads_dir: Optional[Path] = None,
        media_root: Optional[Path] = None,
        public_prefix: str = "/uploads",
    ):
        self.db = db
        self.uploads_dir = Path(uploads_dir or settings.uploads_dir)
        self.media_root = Path(media_root or settings.media_root)
        self.public_prefix = public_prefix.rstrip("/")

    def get_file_data(self, file_name: str) -> FileData:
        """
        Describe a file in the uploads directory.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = self.uploads_dir / file_name
        size = file_path.stat().st_size
        mimetype, _ = mimetypes.guess_type(file_name)
        return FileData(
            filepath=file_path,
            original_file_name=file_name,
            size=size,
            mimetype=mimetype or "",
        )

    async def find_by_name(self, name: str) -> Optional[MediaFile]:
        stmt = select(MediaFile).where(MediaFile.name == name).order_by(MediaFile.id).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upload(self, file_data: FileData, file_info: FileInfo) -> MediaFile:
        """
        Copy a file into the media root and record it.

        Args:
            file_data: Source file description
            file_info: Name, alternative text and caption to store

        Returns:
            Stored media file
        """
        ext = file_data.filepath.suffix.lower()
        file_hash = f"{_UNSAFE.sub('_', file_info.name.lower()).strip('_')}_{uuid4().hex[:10]}"
        destination = self.media_root / f"{file_hash}{ext}"

        self.media_root.mkdir(parents=True, exist_ok=True)
        await asyncio.to_thread(shutil.copyfile, file_data.filepath, destination)

        media_file = MediaFile(
            name=file_info.name,
            alternative_text=file_info.alternative_text,
            caption=file_info.caption,
            hash=file_hash,
            ext=ext,
            mime=file_data.mimetype,
            size=round(file_data.size / 1000, 2),
            url=f"{self.public_prefix}/{file_hash}{ext}",
        )
        self.db.add(media_file)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            destination.unlink(missing_ok=True)
            raise

        metrics_collector.record_media_file("uploaded")
        logger.info(
            "Media file uploaded",
            extra={"file_id": media_file.id, "name": media_file.name, "url": media_file.url},
        )
        return media_file

    async def upload_file(self, file_name: str) -> MediaFile:
        """Upload a file from the uploads directory under its extension-less name."""
        name = strip_extension(file_name)
        return await self.upload(
            self.get_file_data(file_name),
            FileInfo(
                name=name,
                alternative_text=f"An image uploaded to Traverse called {name}",
                caption=name,
            ),
        )

    async def check_file_exists_before_upload(
        self, file_names: Sequence[str]
    ) -> MediaFile | list[MediaFile]:
        """
        Resolve file names to media files, uploading only those not yet stored.

        A stored file matches when its name equals the file name without
        extension.

        Returns:
            The media file when one name was given, otherwise existing files
            followed by newly uploaded ones
        """
        existing_files = []
        uploaded_files = []

        for file_name in file_names:
            existing = await self.find_by_name(strip_extension(file_name))
            if existing is not None:
                metrics_collector.record_media_file("reused")
                logger.info(
                    "Media file already stored, reusing it",
                    extra={"file_id": existing.id, "file_name": file_name},
                )
                existing_files.append(existing)
            else:
                uploaded_files.append(await self.upload_file(file_name))

        all_files = existing_files + uploaded_files
        return all_files[0] if len(all_files) == 1 else all_files
