"""Shared fixtures: every test gets its own freshly migrated SQLite file."""

import pytest
from fastapi.testclient import TestClient

from subway_api.app.core.config import settings
from subway_api.app.core.db import init_db
from subway_api.app.main import app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    db_file = tmp_path / "subway.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    init_db()
    return db_file


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
