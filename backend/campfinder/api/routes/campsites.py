"""Campsite Routes: public listing/search/detail plus admin create/update/delete.

Invariants:
    - /search and /options are declared before /{campsite_id} so they never
      parse as an id
    - Writes require an ADMIN token (require_admin)
    - locale query parameters are validated against Locale (400 otherwise)
    - Deleting a listing removes its stored photos best-effort
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.api.dependencies import get_storage, require_admin
from campfinder.core.campsite_filter import DEFAULT_MAX_PRICE, SearchFilters
from campfinder.core.domain_types import DEFAULT_LOCALE, Locale
from campfinder.core.label_mapping import ACTIVITY_OPTIONS, FACILITY_OPTIONS
from campfinder.core.repository_protocols import ImageStorage
from campfinder.infrastructure.database import get_db
from campfinder.schemas.campsite import (
    CampsiteCreate,
    CampsiteCreatedResponse,
    CampsiteDetailResponse,
    CampsiteListResponse,
    CampsiteResponse,
    CampsiteSearchResponse,
    CampsiteUpdate,
    CampsiteView,
    FilterOption,
    FilterOptionsResponse,
)
from campfinder.services.campsite_service import CampsiteService
from campfinder.services.image_service import remove_listing_images

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/campsites", tags=["campsites"])


@router.get("", response_model=CampsiteListResponse)
async def list_campsites(
    q: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """All listings, newest first; q narrows by name/address/description."""
    campsites = await CampsiteService(db).list_campsites(q)
    return CampsiteListResponse(
        campsites=[CampsiteResponse.from_record(c.to_dict()) for c in campsites],
    )


@router.get("/search", response_model=CampsiteSearchResponse)
async def search_campsites(
    keyword: str = Query("", max_length=200),
    max_price: int = Query(DEFAULT_MAX_PRICE, ge=0),
    min_price: int | None = Query(None, ge=0),
    facilities: list[str] = Query([]),
    activities: list[str] = Query([]),
    locale: Locale = Query(DEFAULT_LOCALE),
    db: AsyncSession = Depends(get_db),
):
    filters = SearchFilters(
        keyword=keyword,
        max_price=max_price,
        min_price=min_price,
        facilities=facilities,
        activities=activities,
    )
    views = await CampsiteService(db).search(filters, locale)
    return CampsiteSearchResponse(
        count=len(views),
        campsites=[CampsiteView.model_validate(v) for v in views],
    )


@router.get("/options", response_model=FilterOptionsResponse)
async def filter_options():
    """Facility/activity keys with ja/en labels for the filter UI."""
    return FilterOptionsResponse(
        facilities=[FilterOption(**o) for o in FACILITY_OPTIONS],
        activities=[FilterOption(**o) for o in ACTIVITY_OPTIONS],
    )


@router.get("/{campsite_id}", response_model=CampsiteDetailResponse)
async def get_campsite(
    campsite_id: UUID,
    locale: Locale | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    campsite = await CampsiteService(db).get(campsite_id)
    record = campsite.to_dict()
    return CampsiteDetailResponse(
        data=CampsiteResponse.from_record(record),
        localized=CampsiteView.from_record(record, locale) if locale else None,
    )


@router.post(
    "", response_model=CampsiteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_campsite(
    body: CampsiteCreate, db: AsyncSession = Depends(get_db),
):
    campsite = await CampsiteService(db).create(body)
    return CampsiteCreatedResponse(
        message="キャンプ場を登録しました",
        campsite=CampsiteResponse.from_record(campsite.to_dict()),
    )


@router.put("/{campsite_id}", dependencies=[Depends(require_admin)])
async def update_campsite(
    campsite_id: UUID,
    body: CampsiteUpdate,
    db: AsyncSession = Depends(get_db),
):
    campsite = await CampsiteService(db).update(campsite_id, body)
    return {
        "success": True,
        "data": CampsiteResponse.from_record(campsite.to_dict()),
    }


@router.delete("/{campsite_id}", dependencies=[Depends(require_admin)])
async def delete_campsite(
    campsite_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: ImageStorage = Depends(get_storage),
):
    campsite = await CampsiteService(db).delete(campsite_id)
    await remove_listing_images(storage, campsite)
    return {"success": True, "message": "キャンプ場を削除しました"}
