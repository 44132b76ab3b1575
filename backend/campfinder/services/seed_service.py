"""Seed Service: load the bundled sample listings.

Invariants:
    - Upsert keyed on name_ja: rerunning never duplicates a sample
    - Samples go through CampsiteCreate, same normalization as admin input
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.core.sample_campsites import SAMPLE_CAMPSITES
from campfinder.models.campsite import Campsite
from campfinder.schemas.campsite import CampsiteCreate, SeedResult

logger = logging.getLogger(__name__)


async def seed_sample_campsites(db: AsyncSession) -> SeedResult:
    inserted = updated = 0
    for sample in SAMPLE_CAMPSITES:
        values = CampsiteCreate.model_validate(sample).model_dump()
        result = await db.execute(
            select(Campsite).where(Campsite.name_ja == values["name_ja"]),
        )
        existing = result.scalars().first()
        if existing is None:
            db.add(Campsite(**values))
            inserted += 1
        else:
            for key, value in values.items():
                setattr(existing, key, value)
            updated += 1
    await db.commit()

    logger.info(
        f"Sample data seeded: {inserted} inserted, {updated} updated",
        extra={"inserted": inserted},
    )
    return SeedResult(
        message="サンプルデータを投入しました", inserted=inserted, updated=updated,
    )
