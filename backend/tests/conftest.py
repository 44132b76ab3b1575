"""Root conftest: shared test configuration."""

import os

# Settings are cached on first import; pin test values before anything loads
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-0123456789abcdef0123")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ADMIN_ALLOWED_EMAILS", "admin@example.com,owner@example.com")
os.environ.setdefault("ADMIN_INVITE_CODES", "CAMP-2024")
os.environ.setdefault("ADMIN_SETUP_KEY", "test-setup-key")
os.environ.setdefault("SUPABASE_URL", "")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "")
os.environ.setdefault("ENVIRONMENT", "test")
