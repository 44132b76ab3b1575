"""Image Service: upload/remove listing photos and keep campsite.images in sync.

Invariants:
    - Each file is validated and uploaded independently; one bad file never
      blocks the rest of the batch
    - Only successfully uploaded URLs are appended to campsite.images
    - Object paths within one batch have strictly increasing timestamps
    - Storage cleanup after a listing is deleted is best-effort (logged, not raised)
"""

import logging
import time
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.core.errors import CampfinderError, ErrorContext, ResourceNotFoundError
from campfinder.core.image_rules import (
    build_object_path,
    file_extension,
    object_path_from_url,
    validate_image,
)
from campfinder.core.repository_protocols import ImageStorage
from campfinder.models.campsite import Campsite
from campfinder.schemas.campsite import ImageUploadError, ImageUploadResponse
from campfinder.services.campsite_service import CampsiteService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageFile:
    """Raw upload as read from the multipart request."""
    filename: str
    content_type: str | None
    data: bytes


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ImageService:

    def __init__(self, db: AsyncSession, storage: ImageStorage, max_bytes: int):
        self.db = db
        self.storage = storage
        self.max_bytes = max_bytes

    async def upload_images(
        self, campsite_id: UUID, files: list[ImageFile],
    ) -> ImageUploadResponse:
        campsite = await CampsiteService(self.db).get(campsite_id)

        uploaded: list[str] = []
        errors: list[ImageUploadError] = []
        last_ts = 0
        for image in files:
            last_ts = max(_now_ms(), last_ts + 1)
            try:
                url = await self._upload_one(campsite_id, image, last_ts)
            except CampfinderError as e:
                errors.append(ImageUploadError(file=image.filename, message=e.message))
                continue
            uploaded.append(url)

        if uploaded:
            # JSON column: assign a new list so the change is flushed
            campsite.images = [*(campsite.images or []), *uploaded]
            await self.db.commit()
            await self.db.refresh(campsite)

        logger.info(
            f"Images uploaded: {len(uploaded)} ok, {len(errors)} failed",
            extra={"campsite_id": str(campsite_id)},
        )
        return ImageUploadResponse(
            uploaded=uploaded, errors=errors, images=list(campsite.images or []),
        )

    async def _upload_one(self, campsite_id: UUID, image: ImageFile, ts_ms: int) -> str:
        validate_image(image.content_type, len(image.data), self.max_bytes)
        ext = file_extension(image.filename, image.content_type)
        path = build_object_path(str(campsite_id), ext, ts_ms)
        return await self.storage.upload(path, image.data, image.content_type)

    async def remove_image(self, campsite_id: UUID, image_url: str) -> list[str]:
        """Delete one photo from storage and from the listing; returns remaining URLs."""
        campsite = await CampsiteService(self.db).get(campsite_id)
        if image_url not in (campsite.images or []):
            raise ResourceNotFoundError(
                "Image", image_url, ErrorContext(campsite_id=str(campsite_id)),
            )
        object_path = object_path_from_url(image_url, self.storage.bucket)
        await self.storage.remove([object_path])

        campsite.images = [url for url in campsite.images if url != image_url]
        await self.db.commit()
        await self.db.refresh(campsite)
        logger.info(
            "Image removed",
            extra={"campsite_id": str(campsite_id), "object_path": object_path},
        )
        return list(campsite.images)


async def remove_listing_images(storage: ImageStorage, campsite: Campsite) -> None:
    """Best-effort removal of a deleted listing's stored photos."""
    paths = []
    for url in campsite.images or []:
        try:
            paths.append(object_path_from_url(url, storage.bucket))
        except CampfinderError:
            continue  # external URL, not ours to delete
    if not paths:
        return
    try:
        await storage.remove(paths)
    except CampfinderError as e:
        logger.warning(
            f"Image cleanup failed: {e.message}",
            extra={"campsite_id": str(campsite.id), "error_code": e.code},
        )
