"""Supabase Image Storage: listing photos in a hosted object-storage bucket.

Invariants:
    - upload() never overwrites (upsert disabled) and returns the public URL
    - Every SDK failure is mapped to StorageError (core/errors.py)
    - Missing SUPABASE_URL / key raises ConfigurationError on first use, not at import
    - Blocking SDK calls run in a worker thread (asyncio.to_thread)

Design Decisions:
    - Sync supabase client in a thread over the async client: same call surface as
      the scripts that manage the bucket by hand
"""

import asyncio
import logging

from supabase import Client, create_client

from campfinder.core.errors import ConfigurationError, StorageError

logger = logging.getLogger(__name__)

CACHE_CONTROL_SECONDS = "3600"


class SupabaseImageStorage:
    """ImageStorage implementation backed by Supabase Storage."""

    def __init__(self, url: str, service_key: str, bucket: str):
        self._url = url
        self._service_key = service_key
        self.bucket = bucket
        self._client: Client | None = None

    def _bucket(self):
        if self._client is None:
            if not self._url or not self._service_key:
                raise ConfigurationError(
                    "Object storage is not configured (SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY)",
                )
            self._client = create_client(self._url, self._service_key)
        return self._client.storage.from_(self.bucket)

    def _upload_sync(self, object_path: str, data: bytes, content_type: str) -> str:
        bucket = self._bucket()
        bucket.upload(
            object_path,
            data,
            file_options={
                "content-type": content_type,
                "cache-control": CACHE_CONTROL_SECONDS,
                "upsert": "false",
            },
        )
        return bucket.get_public_url(object_path)

    async def upload(self, object_path: str, data: bytes, content_type: str) -> str:
        try:
            url = await asyncio.to_thread(
                self._upload_sync, object_path, data, content_type,
            )
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(
                f"Image upload failed: {e}",
                extra={"bucket": self.bucket, "object_path": object_path},
            )
            raise StorageError(str(e), "upload") from e
        logger.info(
            "Image uploaded",
            extra={"bucket": self.bucket, "object_path": object_path},
        )
        return url

    async def remove(self, object_paths: list[str]) -> None:
        if not object_paths:
            return
        try:
            await asyncio.to_thread(
                lambda: self._bucket().remove(object_paths),
            )
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(
                f"Image delete failed: {e}", extra={"bucket": self.bucket},
            )
            raise StorageError(str(e), "delete") from e
