"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - auth_headers carries a token minted by POST /api/Auth/token

Design Decisions:
    - Tokens obtained through the real endpoint: exercises issue + verify together
"""

import pytest
from httpx import ASGITransport, AsyncClient

from devhouse.infrastructure.database import get_db, DatabaseSessionManager
import devhouse.infrastructure.database as db_module
from devhouse.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
async def auth_headers(client):
    res = await client.post("/api/Auth/token")
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()}"}


@pytest.fixture
async def seed(client, auth_headers):
    """Factory: POST a payload to a resource and return the created JSON."""
    async def _create(resource: str, payload: dict) -> dict:
        res = await client.post(f"/api/{resource}", json=payload, headers=auth_headers)
        assert res.status_code == 201, res.text
        return res.json()
    return _create
