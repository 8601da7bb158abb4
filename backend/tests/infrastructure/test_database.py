"""Tests for DatabaseSessionManager — error mapping, health check, singleton access."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import NoResultFound, OperationalError

import claimcount.infrastructure.database as database
from claimcount.core.errors import DatabaseError
from claimcount.infrastructure.database import get_db_manager, to_database_error


async def test_health_check_passes_on_reachable_db(db_manager):
    assert await db_manager.health_check() is True


async def test_missing_table_raises_database_error(broken_db_manager):
    with pytest.raises(DatabaseError) as exc:
        async with broken_db_manager.session() as session:
            await session.execute(text("SELECT * FROM gis_claims"))
    assert exc.value.operation == "execute"
    assert exc.value.http_status == 503


async def test_non_database_errors_pass_through(db_manager):
    with pytest.raises(KeyError):
        async with db_manager.session():
            raise KeyError("not a db error")


def test_operational_error_maps_to_execute():
    error = to_database_error(OperationalError("SELECT 1", {}, Exception("gone")))
    assert error.operation == "execute"
    assert error.code == "DATABASE_ERROR"


def test_other_sqlalchemy_error_maps_to_query():
    assert to_database_error(NoResultFound()).operation == "query"


def test_get_db_manager_requires_init(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    with pytest.raises(RuntimeError):
        get_db_manager()


def test_init_db_sets_singleton(monkeypatch, tmp_path):
    monkeypatch.setattr(database, "db_manager", None)
    manager = database.init_db(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
    assert get_db_manager() is manager
