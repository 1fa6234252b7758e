"""Fixtures de test / Test fixtures."""

import os
import tempfile

# Base temporaire et limiteur coupe avant tout import / Temp DB and limiter off before any import
_TMP_DIR = tempfile.mkdtemp(prefix="fuel_tracker_tests_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/test.db"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "true"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from fuel_tracker.database import Base, async_session, engine  # noqa: E402
from fuel_tracker.main import app  # noqa: E402
from fuel_tracker.services.fuel_log_store import FuelLogStore  # noqa: E402
from fuel_tracker.utils.seed import seed_default_options  # noqa: E402
import fuel_tracker.models  # noqa: E402,F401


@pytest.fixture
async def db():
    """Tables recreees et options par defaut / Fresh tables with default options."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_default_options(session)
    yield
    await engine.dispose()


@pytest.fixture
async def session(db):
    async with async_session() as s:
        yield s


@pytest.fixture
async def store(session):
    return FuelLogStore(session)


@pytest.fixture
async def client(db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_client(client):
    resp = await client.post("/api/auth/login", json={"password": "secret"})
    assert resp.status_code == 200
    client.headers["Authorization"] = f"Bearer {resp.json()['access_token']}"
    return client
