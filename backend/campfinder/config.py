"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in production)
    - get_settings() is cached (lru_cache); single instance per process
    - List settings accept comma-separated env values (ADMIN_ALLOWED_EMAILS=a@x,b@y)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _split_csv(v):
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "development"

    # Database
    database_url: str = (
        "postgresql+asyncpg://campfinder:campfinder@db:5432/campfinder"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "dev-only-change-me-to-a-long-random-secret"
    jwt_expire_days: int = 7
    auth_cookie_name: str = "auth-token"
    bcrypt_rounds: int = 12
    admin_allowed_emails: Annotated[list[str], NoDecode] = []
    admin_invite_codes: Annotated[list[str], NoDecode] = []
    admin_setup_key: str = ""

    @field_validator("admin_allowed_emails", "admin_invite_codes", mode="before")
    @classmethod
    def split_comma_separated(cls, v):
        return _split_csv(v)

    # Object storage (Supabase)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    storage_bucket: str = "campsite-images"
    max_image_bytes: int = 5 * 1024 * 1024

    # API
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        return _split_csv(v)

    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def token_lifetime(self) -> timedelta:
        return timedelta(days=self.jwt_expire_days)


@lru_cache
def get_settings() -> Settings:
    return Settings()
