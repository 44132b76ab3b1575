"""Campsite Service: CRUD and search over stored listings.

Invariants:
    - Missing ids raise ResourceNotFoundError (mapped to 404 by the global handler)
    - list_campsites() returns newest first
    - search() loads every listing, localizes it, then applies the pure filter
      predicate (core/campsite_filter.py); the DB is not queried per predicate
    - Writes commit before returning; the returned ORM object is refreshed
"""

import logging
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.core.bilingual import localize
from campfinder.core.campsite_filter import SearchFilters, filter_campsites
from campfinder.core.domain_types import Locale
from campfinder.core.errors import ErrorContext, ResourceNotFoundError
from campfinder.models.campsite import Campsite
from campfinder.schemas.campsite import CampsiteCreate, CampsiteUpdate

logger = logging.getLogger(__name__)

_QUERY_COLUMNS = (
    Campsite.name_ja,
    Campsite.name_en,
    Campsite.address_ja,
    Campsite.description_ja,
)


class CampsiteService:
    """Listing persistence and search."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_campsites(self, query: str | None = None) -> list[Campsite]:
        """All listings, optionally narrowed by a case-insensitive text query."""
        stmt = select(Campsite).order_by(Campsite.created_at.desc())
        needle = (query or "").strip().lower()
        if needle:
            stmt = stmt.where(or_(*(
                func.lower(column).contains(needle, autoescape=True)
                for column in _QUERY_COLUMNS
            )))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get(self, campsite_id: UUID) -> Campsite:
        campsite = await self.db.get(Campsite, campsite_id)
        if campsite is None:
            raise ResourceNotFoundError(
                "Campsite", str(campsite_id),
                ErrorContext(campsite_id=str(campsite_id)),
            )
        return campsite

    async def create(self, payload: CampsiteCreate) -> Campsite:
        campsite = Campsite(**payload.model_dump())
        self.db.add(campsite)
        await self.db.commit()
        await self.db.refresh(campsite)
        logger.info(
            f"Campsite created: {campsite.name_ja}",
            extra={"campsite_id": str(campsite.id)},
        )
        return campsite

    async def update(self, campsite_id: UUID, payload: CampsiteUpdate) -> Campsite:
        campsite = await self.get(campsite_id)
        for key, value in payload.model_dump().items():
            setattr(campsite, key, value)
        await self.db.commit()
        await self.db.refresh(campsite)
        logger.info(
            "Campsite updated", extra={"campsite_id": str(campsite_id)},
        )
        return campsite

    async def delete(self, campsite_id: UUID) -> Campsite:
        """Delete and return the removed listing (callers clean up its images)."""
        campsite = await self.get(campsite_id)
        await self.db.delete(campsite)
        await self.db.commit()
        logger.info(
            "Campsite deleted", extra={"campsite_id": str(campsite_id)},
        )
        return campsite

    async def search(self, filters: SearchFilters, locale: Locale) -> list[dict]:
        """Localized views of every listing matching filters."""
        campsites = await self.list_campsites()
        views = [localize(c.to_dict(), locale) for c in campsites]
        return filter_campsites(views, filters)
