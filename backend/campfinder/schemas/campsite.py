"""Campsite Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - Input accepts snake_case (name_ja), camelCase (nameJa) or nested bilingual
      ({"name": {"ja": ..., "en": ...}}); all normalize to the same fields
    - Output is camelCase with bilingual pairs nested under their stem
    - Empty optional strings are accepted for phone/website/reservationUrl
    - facilities/activities are normalized through the label mapping tables
    - price_max >= price_min when both are present

Design Decisions:
    - alias_generator=to_camel + populate_by_name: one model serves both key styles
    - Validation messages in Japanese: the admin panel displays them verbatim
"""

import re
from datetime import datetime
from uuid import UUID

from pydantic import (
    AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter,
    ValidationError, field_validator, model_validator,
)
from pydantic.alias_generators import to_camel

from campfinder.core.bilingual import flatten_bilingual, group_bilingual, localize
from campfinder.core.domain_types import Locale
from campfinder.core.label_mapping import map_activities, map_facilities

_PHONE = re.compile(r"^[\d\-+()\s]*$")
# Upper bound of the Integer price columns
MAX_PRICE_YEN = 2_147_483_647
_HTTP_URL = TypeAdapter(AnyHttpUrl)


def _check_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        raise ValueError("有効なURLを入力してください")
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# --- Input --------------------------------------------------------------------

class CampsiteCreate(_CamelModel):
    """Create payload from the admin form or a transformed CSV row."""
    name_ja: str = Field(min_length=1, max_length=100)
    name_en: str | None = Field(None, max_length=100)
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)
    address_ja: str = Field(min_length=1, max_length=200)
    address_en: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    website: str | None = Field(None, max_length=500)
    reservation_url: str | None = Field(None, max_length=500)
    reservation_phone: str | None = Field(None, max_length=50)
    reservation_email: str | None = Field(None, max_length=255)
    price: str = Field(min_length=1, max_length=100)
    price_min: int | None = Field(None, ge=0, le=MAX_PRICE_YEN)
    price_max: int | None = Field(None, ge=0, le=MAX_PRICE_YEN)
    check_in_time: str | None = Field(None, max_length=50)
    check_out_time: str | None = Field(None, max_length=50)
    cancellation_policy_ja: str | None = Field(None, max_length=500)
    cancellation_policy_en: str | None = Field(None, max_length=500)
    nearest_station_ja: str = Field(min_length=1, max_length=100)
    nearest_station_en: str | None = Field(None, max_length=100)
    access_time_ja: str = Field(min_length=1, max_length=100)
    access_time_en: str | None = Field(None, max_length=100)
    description_ja: str = Field("", max_length=1000)
    description_en: str | None = Field(None, max_length=1000)
    facilities: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_nested_bilingual(cls, data):
        if isinstance(data, dict):
            return flatten_bilingual(data)
        return data

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        if v and not _PHONE.match(v):
            raise ValueError("有効な電話番号を入力してください")
        return v

    @field_validator("website", "reservation_url")
    @classmethod
    def check_optional_url(cls, v: str | None) -> str | None:
        return _check_url(v) if v else v

    @field_validator("images")
    @classmethod
    def check_image_urls(cls, v: list[str]) -> list[str]:
        return [_check_url(url.strip()) for url in v]

    @field_validator("facilities")
    @classmethod
    def normalize_facilities(cls, v: list[str]) -> list[str]:
        return map_facilities([item for item in v if item.strip()])

    @field_validator("activities")
    @classmethod
    def normalize_activities(cls, v: list[str]) -> list[str]:
        return map_activities([item for item in v if item.strip()])

    @model_validator(mode="after")
    def check_price_range(self):
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_max < self.price_min
        ):
            raise ValueError("最大料金は最小料金以上である必要があります")
        return self


class CampsiteUpdate(CampsiteCreate):
    """Full-replacement update payload (PUT semantics)."""


# --- Output -------------------------------------------------------------------

class BilingualText(BaseModel):
    ja: str | None = None
    en: str | None = None


class CampsiteResponse(_CamelModel):
    """Public JSON shape of a stored campsite."""
    id: UUID
    name: BilingualText
    address: BilingualText
    nearest_station: BilingualText
    access_time: BilingualText
    description: BilingualText
    cancellation_policy: BilingualText
    lat: float | None = None
    lng: float | None = None
    phone: str | None = None
    website: str | None = None
    reservation_url: str | None = None
    reservation_phone: str | None = None
    reservation_email: str | None = None
    price: str
    price_min: int | None = None
    price_max: int | None = None
    check_in_time: str | None = None
    check_out_time: str | None = None
    facilities: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: dict) -> "CampsiteResponse":
        return cls.model_validate(group_bilingual(record))


class CampsiteView(_CamelModel):
    """Single-locale view used by search results and the detail page."""
    id: UUID
    locale: Locale
    name: str
    address: str
    nearest_station: str
    access_time: str
    description: str
    cancellation_policy: str
    lat: float | None = None
    lng: float | None = None
    phone: str | None = None
    website: str | None = None
    reservation_url: str | None = None
    price: str
    price_min: int | None = None
    price_max: int | None = None
    check_in_time: str | None = None
    check_out_time: str | None = None
    facilities: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: dict, locale: Locale) -> "CampsiteView":
        return cls.model_validate(localize(record, locale))


class CampsiteListResponse(BaseModel):
    campsites: list[CampsiteResponse]


class CampsiteDetailResponse(BaseModel):
    success: bool = True
    data: CampsiteResponse
    localized: CampsiteView | None = None


class CampsiteCreatedResponse(BaseModel):
    message: str
    campsite: CampsiteResponse


class CampsiteSearchResponse(BaseModel):
    count: int
    campsites: list[CampsiteView]


class FilterOption(BaseModel):
    key: str
    ja: str
    en: str


class FilterOptionsResponse(BaseModel):
    facilities: list[FilterOption]
    activities: list[FilterOption]


# --- Admin: import / images ---------------------------------------------------

class ImportRowError(BaseModel):
    row: int
    message: str


class ImportResult(BaseModel):
    """CSV import outcome: inserted count plus per-row failures."""
    success: int
    errors: list[ImportRowError] = Field(default_factory=list)


class ImageUploadError(BaseModel):
    file: str
    message: str


class ImageUploadResponse(BaseModel):
    uploaded: list[str]
    errors: list[ImageUploadError] = Field(default_factory=list)
    images: list[str]


class SeedResult(BaseModel):
    message: str
    inserted: int
    updated: int
