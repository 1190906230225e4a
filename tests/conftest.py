from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from attendance_api.app.core.config import Settings
from attendance_api.app.core.storage import RecordStore
from attendance_api.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    # Nested directory so tests also cover its creation on first save.
    return tmp_path / "data" / "attendance.json"


@pytest.fixture
def store(data_file):
    return RecordStore(str(data_file))


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 18, 19, 5, 9, 250000, tzinfo=timezone.utc)


@pytest.fixture
def app_settings(data_file):
    return Settings(data_file=str(data_file), host="127.0.0.1", port=5050)


@pytest.fixture
def client(app_settings):
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
