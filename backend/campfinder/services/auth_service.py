"""Auth Service: admin registration, login and token issue.

Invariants:
    - Registration requires the email on ADMIN_ALLOWED_EMAILS
    - Emails are unique (ConflictError on duplicates)
    - Login failures never reveal whether the email exists
    - Password hashing and checking run in a worker thread (asyncio.to_thread)
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campfinder.config import Settings
from campfinder.core.domain_types import UserRole
from campfinder.core.errors import AuthenticationError, AuthorizationError, ConflictError
from campfinder.core.security import (
    TokenClaims,
    create_token,
    hash_password,
    is_email_allowed,
    verify_password,
)
from campfinder.models.user import User

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, email: str, password: str) -> User:
        if not is_email_allowed(email, self.settings.admin_allowed_emails):
            logger.warning("Registration rejected: email not allow-listed")
            raise AuthorizationError("このメールアドレスは登録が許可されていません")
        if await self._find_by_email(email) is not None:
            raise ConflictError("このメールアドレスは既に登録されています")

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(
            hash_password, password, self.settings.bcrypt_rounds,
        )
        user = User(
            email=email,
            password_hash=password_hash,
            role=UserRole.ADMIN.value,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info("Admin registered", extra={"user_id": str(user.id)})
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self._find_by_email(email)
        if user is None or not await asyncio.to_thread(
            verify_password, password, user.password_hash,
        ):
            raise AuthenticationError("メールアドレスまたはパスワードが正しくありません")
        logger.info("Login succeeded", extra={"user_id": str(user.id)})
        return user

    def issue_token(self, user: User) -> str:
        claims = TokenClaims(user_id=str(user.id), email=user.email, role=user.role)
        return create_token(
            claims, self.settings.jwt_secret, self.settings.token_lifetime,
        )
