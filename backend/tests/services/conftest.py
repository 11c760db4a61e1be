"""Service test fixtures — async DB, catalog singletons + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Catalog singletons set per test from the `catalog` fixture and restored after
    - Open form sessions cleared around every test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Empty seed and one-letter logos by default so assertions stay short;
      a test module overrides `catalog` when it needs seed records
"""

import base64
from io import BytesIO

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import employee_cards.api.dependencies as deps
import employee_cards.infrastructure.database as db_module
from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.db.base import Base
from employee_cards.infrastructure.database import get_db, DatabaseSessionManager
from employee_cards.main import app
from employee_cards.services import form_service


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
def catalog():
    return CatalogDefaults(seed_records=(), logo_green="G", logo_purple="P")


@pytest.fixture(autouse=True)
def clear_open_forms():
    form_service._open_forms.clear()
    yield
    form_service._open_forms.clear()


@pytest.fixture
async def client(test_engine, test_session_factory, catalog):
    """FastAPI test client with DB dependency and catalog singletons set."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    original_catalog, original_mirror = deps.catalog_defaults, deps.record_mirror
    deps.init_catalog(catalog)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    deps.catalog_defaults, deps.record_mirror = original_catalog, original_mirror


@pytest.fixture
def png_data_url():
    """Factory: solid-colour PNG encoded the way a browser FileReader would."""
    def make(width: int, height: int, color=(200, 30, 30)) -> str:
        buffer = BytesIO()
        Image.new("RGB", (width, height), color).save(buffer, format="PNG")
        return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode()
    return make


@pytest.fixture
def decode_png():
    """Factory: PNG data URL back to a Pillow image."""
    def decode(data_url: str) -> Image.Image:
        header, _, payload = data_url.partition(",")
        assert header == "data:image/png;base64"
        return Image.open(BytesIO(base64.b64decode(payload)))
    return decode
