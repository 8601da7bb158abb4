"""Tests for Settings — env overrides, URL rewrite and injected classification codes."""

from claimcount.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/claims")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/claims"


def test_async_url_left_untouched():
    url = "sqlite+aiosqlite:///claims.db"
    assert Settings(database_url=url).database_url == url


def test_default_classification_codes():
    codes = Settings().classification_codes()
    assert codes.chargeable == 100
    assert codes.applied == frozenset({1, 4})
    assert codes.deleted_charge_status == "D"
    assert codes.default_charge_status == "N"


def test_codes_follow_environment(monkeypatch):
    monkeypatch.setenv("CHARGEABLE_CODE", "200")
    monkeypatch.setenv("AUTOMATIC_APPLICATION_CODE", "7")
    codes = Settings().classification_codes()
    assert codes.chargeable == 200
    assert codes.applied == frozenset({1, 7})
