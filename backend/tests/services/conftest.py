"""Service test fixtures: async DB, fake object storage, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_storage overridden with FakeImageStorage (no network)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Auth cookies minted directly with create_token: route tests don't depend
      on the register/login flow
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from campfinder.api.dependencies import get_storage
from campfinder.db.base import Base
from campfinder.infrastructure.database import get_db, DatabaseSessionManager
from campfinder.models.campsite import Campsite
import campfinder.infrastructure.database as db_module
from campfinder.main import app
from tests.services.fakes import FakeImageStorage, auth_headers, campsite_fields


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_storage():
    return FakeImageStorage()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_storage):
    """FastAPI test client with DB and storage dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: fake_storage

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def admin_headers():
    return auth_headers()


@pytest.fixture
def user_headers():
    return auth_headers(role="USER", email="someone@example.com")


@pytest.fixture
async def make_campsite(test_db):
    """Factory inserting a campsite directly into the test DB."""
    async def _make(**overrides) -> Campsite:
        campsite = Campsite(**campsite_fields(**overrides))
        test_db.add(campsite)
        await test_db.commit()
        await test_db.refresh(campsite)
        return campsite
    return _make
