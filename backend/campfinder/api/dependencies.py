"""Route Dependencies: settings, storage and auth guards for FastAPI Depends().

Invariants:
    - get_current_user raises AuthenticationError (401) for a missing/invalid cookie
    - require_admin raises AuthorizationError (403) for non-ADMIN roles
    - require_setup_key compares the bearer token in constant time
    - get_storage is the single seam tests override with an in-memory fake
"""

import logging
import secrets
from functools import lru_cache

from fastapi import Depends, Header, Request

from campfinder.config import Settings, get_settings
from campfinder.core.domain_types import UserRole
from campfinder.core.errors import AuthenticationError, AuthorizationError
from campfinder.core.repository_protocols import ImageStorage
from campfinder.core.security import TokenClaims, decode_token
from campfinder.infrastructure.storage_client import SupabaseImageStorage

logger = logging.getLogger(__name__)


@lru_cache
def _supabase_storage(url: str, key: str, bucket: str) -> SupabaseImageStorage:
    return SupabaseImageStorage(url, key, bucket)


def get_storage(settings: Settings = Depends(get_settings)) -> ImageStorage:
    return _supabase_storage(
        settings.supabase_url,
        settings.supabase_service_role_key,
        settings.storage_bucket,
    )


def get_current_user(
    request: Request, settings: Settings = Depends(get_settings),
) -> TokenClaims:
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise AuthenticationError()
    claims = decode_token(token, settings.jwt_secret)
    if claims is None:
        raise AuthenticationError("トークンが無効です")
    return claims


def require_admin(user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    if user.role != UserRole.ADMIN.value:
        logger.warning("Admin route denied", extra={"user_id": user.user_id})
        raise AuthorizationError()
    return user


def require_setup_key(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Bearer ADMIN_SETUP_KEY guard for one-off maintenance endpoints."""
    scheme, _, token = (authorization or "").partition(" ")
    if (
        scheme.lower() != "bearer"
        or not settings.admin_setup_key
        or not secrets.compare_digest(
            token.strip().encode(), settings.admin_setup_key.encode(),
        )
    ):
        raise AuthenticationError("Unauthorized")
