from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the accounts package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from accounts.core import config as core_config  # noqa: E402
from accounts.db import models  # noqa: E402
from accounts.db.session import create_db_engine  # noqa: E402

JWT_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Pin the JWT secret and reset cached settings around every test."""
    monkeypatch.setenv("JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("JWT_EXPIRE_SECONDS", "3600")
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with the schema created; yields its engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()

    engine = create_db_engine()
    models.Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()
