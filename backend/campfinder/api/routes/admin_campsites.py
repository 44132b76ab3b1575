"""Admin Campsite Routes: CSV import, photo management and sample-data seeding.

Invariants:
    - Import/image endpoints require an ADMIN token
    - seed-data is guarded by the setup key, not a user token (works before
      the first admin account exists)
    - A missing CSV upload is a 400, not a 422
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.api.dependencies import get_storage, require_admin, require_setup_key
from campfinder.config import Settings, get_settings
from campfinder.core.csv_import import build_template_csv
from campfinder.core.errors import CampsiteValidationError
from campfinder.core.repository_protocols import ImageStorage
from campfinder.infrastructure.database import get_db
from campfinder.schemas.campsite import ImageUploadResponse, ImportResult, SeedResult
from campfinder.services.csv_import_service import CsvImportService
from campfinder.services.image_service import ImageFile, ImageService
from campfinder.services.seed_service import seed_sample_campsites

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post(
    "/campsites/import", response_model=ImportResult,
    dependencies=[Depends(require_admin)],
)
async def import_campsites(
    csv_file: UploadFile | None = File(None, alias="csv"),
    db: AsyncSession = Depends(get_db),
):
    if csv_file is None:
        raise CampsiteValidationError("CSVファイルが見つかりません", field="csv")
    raw = await csv_file.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise CampsiteValidationError(
            "CSVファイルはUTF-8で保存してください", field="csv",
        )
    return await CsvImportService(db).import_csv(text)


@router.get(
    "/campsites/import/template", dependencies=[Depends(require_admin)],
)
async def import_template():
    return Response(
        content=build_template_csv(),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": 'attachment; filename="campsites_template.csv"',
        },
    )


@router.post(
    "/campsites/{campsite_id}/images", response_model=ImageUploadResponse,
    dependencies=[Depends(require_admin)],
)
async def upload_images(
    campsite_id: UUID,
    files: list[UploadFile] = File(...),
    db: AsyncSession = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    images = [
        ImageFile(
            filename=f.filename or "upload",
            content_type=f.content_type,
            # One byte past the limit is enough for validate_image to reject it
            data=await f.read(settings.max_image_bytes + 1),
        )
        for f in files
    ]
    service = ImageService(db, storage, settings.max_image_bytes)
    return await service.upload_images(campsite_id, images)


@router.delete(
    "/campsites/{campsite_id}/images", dependencies=[Depends(require_admin)],
)
async def delete_image(
    campsite_id: UUID,
    url: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    service = ImageService(db, storage, settings.max_image_bytes)
    remaining = await service.remove_image(campsite_id, url)
    return {"success": True, "images": remaining}


@router.post(
    "/seed-data", response_model=SeedResult,
    dependencies=[Depends(require_setup_key)],
)
async def seed_data(db: AsyncSession = Depends(get_db)):
    return await seed_sample_campsites(db)
