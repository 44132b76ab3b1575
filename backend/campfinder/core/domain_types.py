"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Supported locales are exactly ja and en; ja is the default
    - All valid states encoded as Enums; no raw string matching

Design Decisions:
    - str Enums: serialize to JSON and JWT claims without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """UI/content locales. Japanese is canonical; English is a translation."""
    JA = "ja"
    EN = "en"


DEFAULT_LOCALE = Locale.JA


class UserRole(str, Enum):
    """Account roles: only ADMIN may mutate listings."""
    ADMIN = "ADMIN"
    USER = "USER"


class ImageContentType(str, Enum):
    """Image MIME types accepted by the uploader."""
    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"
    GIF = "image/gif"


# Bilingual field stems; each has a `_ja` and an `_en` column
BILINGUAL_FIELDS: tuple[str, ...] = (
    "name",
    "address",
    "nearest_station",
    "access_time",
    "description",
    "cancellation_policy",
)
