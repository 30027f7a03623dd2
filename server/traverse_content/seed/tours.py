"""One-shot import of the tour catalogue."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.observability import get_logger
from ..models import MediaFile, Tour
from ..services.document_service import DocumentService
from ..services.permission_service import PermissionService
from ..services.store_service import CoreStore
from ..services.upload_service import UploadService
from . import data

logger = get_logger(__name__)

FIRST_RUN_KEY = "tourDataHasRun"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _media_ids(files: MediaFile | list[MediaFile]) -> list[int]:
    if isinstance(files, MediaFile):
        return [files.id]
    return [media_file.id for media_file in files]


class TourSeeder:
    """Imports tours, their child collections and media into an empty store."""

    def __init__(
        self,
        db: AsyncSession,
        uploads_dir: Optional[Path] = None,
        media_root: Optional[Path] = None,
        environment: Optional[str] = None,
        force: Optional[bool] = None,
    ):
        self.db = db
        self.uploads = UploadService(db, uploads_dir=uploads_dir, media_root=media_root)
        self.permissions = PermissionService(db)
        self.store = CoreStore(db, environment or settings.environment, type="type", name="setup")
        self.force = settings.seed_force_import if force is None else force

    async def is_first_run(self) -> bool:
        has_run = await self.store.get(FIRST_RUN_KEY)
        if has_run and self.force:
            logger.warning("seed_forced", reason="first-run flag already set")
        return not has_run or self.force

    async def run(self) -> bool:
        """
        Import tour data unless it has been imported before.

        Returns:
            True when data was imported, False when the run was skipped

        Raises:
            Exception: Any failure during import, after logging it
        """
        if not await self.is_first_run():
            logger.info(
                "Tour data has already been imported. We cannot reimport unless you clear your database first."
            )
            return False

        try:
            logger.info("Setting up tour data...")
            await self.import_tour_data()
            await self.store.set(FIRST_RUN_KEY, True)
            logger.info("Tour data ready!")
        except Exception:
            logger.error("Could not import tour data")
            raise
        return True

    async def import_tour_data(self) -> None:
        await self.permissions.ensure_default_roles()
        await self.permissions.set_public_permissions(data.PUBLIC_READ_PERMISSIONS)
        await self.import_tours()

    async def create_entry(self, model: str, entry: Mapping[str, Any]) -> Any:
        """
        Create one entry, logging it by title, text or day.

        Errors are logged with the content type and payload, then re-raised.
        """
        try:
            result = await DocumentService(self.db, model).create(entry)
        except Exception as error:
            logger.error(
                "entry_creation_failed",
                model=model,
                entry=dict(entry),
                error=repr(error),
            )
            raise

        label = (
            getattr(result, "title", None)
            or getattr(result, "text", None)
            or getattr(result, "day", None)
            or "No title"
        )
        logger.info(f"Created {model} entry: {label}", model=model, entry_id=result.id)
        return result

    async def import_tours(self) -> None:
        logger.info("Starting tour import...")

        await self.import_run_the_ranges()

        for hero_file, fields in data.COMING_SOON_TOURS:
            logger.info(f"Creating {fields['title']} tour...")
            hero = await self.uploads.check_file_exists_before_upload([hero_file])
            await self.create_entry("tour", {
                **fields,
                "heroImage": _media_ids(hero)[0],
                "publishedAt": _now(),
            })

        logger.info("Tour import completed successfully!")

    async def import_run_the_ranges(self) -> None:
        logger.info("Uploading images for Run the Ranges tour...")
        hero = await self.uploads.check_file_exists_before_upload(data.RUN_THE_RANGES_HERO)
        gallery = await self.uploads.check_file_exists_before_upload(data.RUN_THE_RANGES_GALLERY)

        logger.info("Creating Run the Ranges tour...")
        await self.create_entry("tour", {
            **data.RUN_THE_RANGES,
            "heroImage": _media_ids(hero)[0],
            "galleryImages": _media_ids(gallery),
            "publishedAt": _now(),
        })

        logger.info("Finding created tour...")
        created_tours = await DocumentService(self.db, "tour").find_many(
            where={"slug": data.RUN_THE_RANGES_SLUG}
        )
        if not created_tours:
            logger.error("Could not find created tour!", slug=data.RUN_THE_RANGES_SLUG)
            return

        tour: Tour = created_tours[0]
        logger.info("Found tour, creating related content...")

        logger.info("Creating tour highlights...")
        for order, text in enumerate(data.RUN_THE_RANGES_HIGHLIGHTS, start=1):
            await self.create_entry("tour-highlight", {
                "tour": tour.id,
                "text": text,
                "order": order,
                "publishedAt": _now(),
            })

        logger.info("Creating tour inclusions...")
        for order, text in enumerate(data.RUN_THE_RANGES_INCLUSIONS, start=1):
            await self.create_entry("tour-inclusion", {
                "tour": tour.id,
                "text": text,
                "order": order,
                "publishedAt": _now(),
            })

        logger.info("Creating tour itinerary...")
        for item in data.RUN_THE_RANGES_ITINERARY:
            await self.create_entry("tour-itinerary", {
                "tour": tour.id,
                **item,
                "publishedAt": _now(),
            })


async def seed_tours(db: AsyncSession, **options: Any) -> bool:
    """Run the tour import on ``db``; see ``TourSeeder`` for options."""
    return await TourSeeder(db, **options).run()
