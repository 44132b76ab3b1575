"""Security Primitives: password hashing, JWT issue/verify, admin allow-lists.

Invariants:
    - Passwords are bcrypt-hashed; plaintext never stored or logged
    - Password input is truncated to bcrypt's 72-byte limit on BOTH hash and verify
    - Tokens are HS256 JWTs carrying userId, email, role, iat, exp
    - decode_token() returns None for any invalid/expired token (never raises)
    - Email comparisons are case-insensitive

Design Decisions:
    - PyJWT + bcrypt: same algorithms the admin cookies were issued with before,
      so existing sessions keep validating
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_BCRYPT_ROUNDS = 12
_BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by the auth-token cookie."""
    user_id: str
    email: str
    role: str

    def to_user(self) -> dict:
        return {"id": self.user_id, "email": self.email, "role": self.role}


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(
        _password_bytes(password), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(
            _password_bytes(password), password_hash.encode("utf-8"),
        )
    except ValueError:
        # malformed stored hash
        return False


def create_token(
    claims: TokenClaims,
    secret: str,
    expires_in: timedelta,
    now: datetime | None = None,
) -> str:
    """Sign claims into a JWT valid for expires_in."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": claims.user_id,
        "email": claims.email,
        "role": claims.role,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: str) -> TokenClaims | None:
    """Verify signature and expiry. None when the token is unusable."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired auth token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid auth token: {e}")
        return None
    try:
        return TokenClaims(
            user_id=str(payload["userId"]),
            email=str(payload["email"]),
            role=str(payload["role"]),
        )
    except KeyError as e:
        logger.warning(f"Auth token missing claim: {e}")
        return None


def is_email_allowed(email: str, allowed: list[str]) -> bool:
    """Allow-list check; an empty allow-list permits no one."""
    normalized = email.strip().lower()
    return any(normalized == entry.strip().lower() for entry in allowed if entry.strip())


def is_invite_code_valid(code: str, valid_codes: list[str]) -> bool:
    return code.strip() in {c.strip() for c in valid_codes if c.strip()}
