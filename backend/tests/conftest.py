"""Root conftest — shared test configuration and claim database fixtures.

Invariants:
    - Every test gets a fresh SQLite file database (tmp_path) with all claim tables
    - Each session comes from its own connection, so sources can run concurrently
    - broken_db_manager points at a database without tables: every query fails
"""

import os

# Ensure tests never reach a real claim database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402

import claimcount.models  # noqa: E402,F401
from claimcount.db.base import Base  # noqa: E402
from claimcount.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'claims.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def broken_db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield manager
    await manager.dispose()


@pytest.fixture
def seed(db_manager):
    """Insert ORM rows into the test database."""
    async def _seed(*rows):
        async with db_manager.session() as session:
            session.add_all(rows)
            await session.commit()
    return _seed
