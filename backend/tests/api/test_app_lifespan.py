"""Tests for create_app — the Settings it receives drive middleware and lifespan."""

import logging

import claimcount.infrastructure.database as database
from claimcount.config import Settings
from claimcount.main import create_app, lifespan


async def test_lifespan_uses_settings_passed_to_create_app(tmp_path, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    db_path = tmp_path / "custom.db"
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        log_level="WARNING", log_format="text",
    )
    app = create_app(settings)
    root = logging.getLogger()
    level = root.level
    try:
        async with lifespan(app):
            assert app.state.settings is settings
            assert database.db_manager.engine.url.database == str(db_path)
            assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if h.get_name() == "claimcount"]:
            root.removeHandler(handler)
        root.setLevel(level)
