"""API test fixtures — httpx client over the ASGI app with the seeded claim database.

Invariants:
    - The lifespan does not run under ASGITransport; the db manager is injected
      through dependency_overrides instead of init_db()
"""

import pytest
from httpx import ASGITransport, AsyncClient

from claimcount.infrastructure.database import get_db_manager
from claimcount.main import app
from tests.services.claim_dataset import GIS_RECORDS, OTHER_RECORDS, orm_rows


def _client_for(manager):
    app.dependency_overrides[get_db_manager] = lambda: manager
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(db_manager, seed):
    await seed(*orm_rows(GIS_RECORDS, OTHER_RECORDS))
    async with _client_for(db_manager) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client(broken_db_manager):
    async with _client_for(broken_db_manager) as c:
        yield c
    app.dependency_overrides.clear()
