"""Test doubles and record builders shared by the service/route tests."""

from datetime import timedelta

from campfinder.config import get_settings
from campfinder.core.errors import StorageError
from campfinder.core.security import TokenClaims, create_token

PUBLIC_PREFIX = "https://storage.test/storage/v1/object/public"


class FakeImageStorage:
    """In-memory ImageStorage: records uploads/removals, optional failures."""

    def __init__(self, bucket: str = "campsite-images"):
        self.bucket = bucket
        self.objects: dict[str, bytes] = {}
        self.removed: list[str] = []
        self.fail_upload = False
        self.fail_remove = False

    async def upload(self, object_path: str, data: bytes, content_type: str) -> str:
        if self.fail_upload:
            raise StorageError("bucket unavailable", "upload")
        self.objects[object_path] = data
        return f"{PUBLIC_PREFIX}/{self.bucket}/{object_path}"

    async def remove(self, object_paths: list[str]) -> None:
        if self.fail_remove:
            raise StorageError("bucket unavailable", "delete")
        for path in object_paths:
            self.objects.pop(path, None)
            self.removed.append(path)


def campsite_fields(**overrides) -> dict:
    """Minimal valid flat campsite record."""
    fields = {
        "name_ja": "テストキャンプ場",
        "name_en": "Test Campsite",
        "address_ja": "東京都八王子市1-1",
        "address_en": "1-1 Hachioji, Tokyo",
        "lat": 35.65,
        "lng": 139.3,
        "price": "¥3,000/泊",
        "price_min": 3000,
        "price_max": 3000,
        "nearest_station_ja": "高尾駅",
        "nearest_station_en": "Takao Station",
        "access_time_ja": "徒歩10分",
        "access_time_en": "10 min walk",
        "description_ja": "川沿いの静かなキャンプ場",
        "description_en": "A quiet riverside campsite",
        "facilities": ["toilet", "shower"],
        "activities": ["hiking"],
        "images": [],
    }
    fields.update(overrides)
    return fields


def auth_headers(role: str = "ADMIN", email: str = "admin@example.com") -> dict:
    settings = get_settings()
    token = create_token(
        TokenClaims(user_id="7f1c8a52-0000-4000-8000-000000000001", email=email, role=role),
        settings.jwt_secret,
        timedelta(days=1),
    )
    return {"Cookie": f"{settings.auth_cookie_name}={token}"}
