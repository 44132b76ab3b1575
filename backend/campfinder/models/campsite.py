"""Campsite ORM: persists one directory listing with its ja/en field pairs.

Invariants:
    - id is UUID primary key (client-side default uuid4)
    - Japanese fields are non-nullable; English fields nullable (fall back to ja)
    - facilities/activities/images are JSON arrays of strings, never NULL
    - updated_at refreshed on every ORM update

Design Decisions:
    - JSON columns for tag lists: native arrays on PostgreSQL, TEXT on SQLite,
      no per-dialect encode/decode in application code
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from campfinder.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Campsite(Base):
    """Campsite listing shown in search results, on the map and on detail pages."""
    __tablename__ = "campsites"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name_ja: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    name_en: Mapped[str | None] = mapped_column(String(100), nullable=True)
    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lng: Mapped[float | None] = mapped_column(Float, nullable=True)
    address_ja: Mapped[str] = mapped_column(String(200), nullable=False)
    address_en: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    price: Mapped[str] = mapped_column(String(100), nullable=False)
    price_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price_max: Mapped[int | None] = mapped_column(Integer, nullable=True)
    nearest_station_ja: Mapped[str] = mapped_column(String(100), nullable=False)
    nearest_station_en: Mapped[str | None] = mapped_column(String(100), nullable=True)
    access_time_ja: Mapped[str] = mapped_column(String(100), nullable=False)
    access_time_en: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description_ja: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    facilities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    activities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    reservation_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    reservation_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reservation_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    check_in_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    check_out_time: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cancellation_policy_ja: Mapped[str | None] = mapped_column(Text, nullable=True)
    cancellation_policy_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    def to_dict(self) -> dict:
        """Flat snake_case snapshot of every column."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
