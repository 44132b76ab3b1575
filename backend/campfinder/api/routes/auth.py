"""Auth Routes: register, login, logout and current-user lookup.

Invariants:
    - The token travels only in an HttpOnly cookie (never in a JSON body)
    - Cookie is SameSite=lax, Secure in production, max-age = token lifetime
    - logout always succeeds, even without a cookie
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.api.dependencies import get_current_user
from campfinder.config import Settings, get_settings
from campfinder.core.security import TokenClaims
from campfinder.infrastructure.database import get_db
from campfinder.models.user import User
from campfinder.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserResponse,
)
from campfinder.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=int(settings.token_lifetime.total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=str(user.id), email=user.email, role=user.role)


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    service = AuthService(db, settings)
    user = await service.register(body.email, body.password)
    _set_auth_cookie(response, service.issue_token(user), settings)
    return AuthResponse(message="登録が完了しました", user=_user_response(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    service = AuthService(db, settings)
    user = await service.authenticate(body.email, body.password)
    _set_auth_cookie(response, service.issue_token(user), settings)
    return AuthResponse(message="ログインしました", user=_user_response(user))


@router.post("/logout")
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    response.delete_cookie(settings.auth_cookie_name, path="/")
    return {"message": "ログアウトしました"}


@router.get("/me", response_model=MeResponse)
async def me(user: TokenClaims = Depends(get_current_user)):
    return MeResponse(user=UserResponse(**user.to_user()))
